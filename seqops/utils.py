"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def as_sequence(sequence):
    """Treat an absent sequence as an empty one."""
    return () if sequence is None else sequence


def check_index(sequence, index, name):
    """Validate a position in `[0, len(sequence))`.

    Negative values are rejected rather than counted from the end
    because -1 is the "not found" sentinel of the search functions.
    """
    if not isint(index):
        raise TypeError(
            name + " indices must be integers, not "
            + index.__class__.__name__)

    if index < 0 or index >= len(sequence):
        raise IndexError(name + " index out of range")


def check_range(sequence, start, end, name):
    """Validate that `0 <= start <= end <= len(sequence)`."""
    for bound in (start, end):
        if not isint(bound):
            raise TypeError(
                name + " indices must be integers, not "
                + bound.__class__.__name__)

    if start < 0 or end > len(sequence):
        raise IndexError(name + " index out of range")
    if start > end:
        raise IndexError(
            "{} start ({}) is greater than end ({})".format(name, start, end))


def check_size(value, name):
    """Validate a non-negative integer dimension."""
    if not isint(value):
        raise TypeError(
            "{} must be an integer, not {}".format(
                name, value.__class__.__name__))
    if value < 0:
        raise ValueError("{} must not be negative".format(name))
