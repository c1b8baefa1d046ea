from .search import _find_index, index_of
from .utils import as_sequence, get_logger, isint


logger = get_logger(__name__)


def arange(start, end):
    """Return the integers from `start` (included) to `end` (excluded).

    Example:

        >>> arange(1, 4)
        [1, 2, 3]
        >>> arange(1, -1)
        []
    """
    if not isint(start) or not isint(end):
        raise TypeError("arange bounds must be integers")

    return list(range(start, end))


def insert(sequence, index, value):
    """Return a new list with `value` inserted at position `index`.

    Items from `index` onward are shifted one position to the right.
    An `index` at or past the end of the sequence appends `value`.

    Example:

        >>> insert([1, 2, 3], 1, 9)
        [1, 9, 2, 3]
        >>> insert([1, 2, 3], 10, 9)
        [1, 2, 3, 9]
    """
    if not isint(index):
        raise TypeError(
            "insert indices must be integers, not "
            + index.__class__.__name__)
    if index < 0:
        raise IndexError("insert index out of range")

    out = list(as_sequence(sequence))
    if index > len(out):
        logger.debug(
            "insert index {} is past the end of a sequence of {} items, "
            "appending instead".format(index, len(out)))

    out.insert(index, value)
    return out


def remove_index(sequence, index):
    """Return a new list without the item at `index`.

    If `index` is out of bounds (this includes negative values such as
    the -1 returned by failed searches) `sequence` is returned
    unchanged.
    """
    if not isint(index):
        raise TypeError(
            "remove_index indices must be integers, not "
            + index.__class__.__name__)

    if sequence is None or index < 0 or index >= len(sequence):
        return sequence

    return list(sequence[:index]) + list(sequence[index + 1:])


def remove(sequence, value):
    """Return a new list without the first item equal to `value`.

    If no item matches, `sequence` is returned unchanged.

    Example:

        >>> remove([1, 2, 3, 2], 2)
        [1, 3, 2]
        >>> remove([1, 2, 3], 4)
        [1, 2, 3]
    """
    return remove_index(sequence, index_of(sequence, value))


def remove_func(pred, sequence):
    """Return a new list without the first item satisfying `pred`.

    If no item matches, `sequence` is returned unchanged.
    """
    return remove_index(sequence, _find_index(pred, sequence, "remove_func"))
