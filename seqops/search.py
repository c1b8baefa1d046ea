"""Queries and predicates over sequences.

Search functions never raise when nothing matches: index lookups
return -1 and value lookups return a `(value, found)` pair or a caller
supplied default.
"""

from collections import Counter

from .errors import Callback
from .utils import as_sequence, isint


def count(pred, sequence):
    """Return the number of items for which `pred` is true."""
    pred = Callback(pred, "count")
    n = 0
    for i, v in enumerate(as_sequence(sequence)):
        if pred(i, v):
            n += 1

    return n


def every(pred, sequence):
    """Return wether `pred` holds for all items (true when empty)."""
    pred = Callback(pred, "every")
    for i, v in enumerate(as_sequence(sequence)):
        if not pred(i, v):
            return False

    return True


def some(pred, sequence):
    """Return wether `pred` holds for at least one item (false when empty)."""
    pred = Callback(pred, "some")
    for i, v in enumerate(as_sequence(sequence)):
        if pred(i, v):
            return True

    return False


def find_index(pred, sequence):
    """Return the index of the first item satisfying `pred` or -1."""
    return _find_index(pred, sequence, "find_index")


def find_last_index(pred, sequence):
    """Return the index of the last item satisfying `pred` or -1."""
    return _find_last_index(pred, sequence, "find_last_index")


def _find_index(pred, sequence, operation):
    pred = Callback(pred, operation)
    for i, v in enumerate(as_sequence(sequence)):
        if pred(i, v):
            return i

    return -1


def _find_last_index(pred, sequence, operation):
    pred = Callback(pred, operation)
    sequence = as_sequence(sequence)
    for i in range(len(sequence) - 1, -1, -1):
        if pred(i, sequence[i]):
            return i

    return -1


def find(pred, sequence):
    """Return the first item satisfying a predicate.

    Args:
        pred (Callable[[Any], bool]): The predicate.
        sequence (Sequence): The searched sequence.

    Return:
        (Any, bool): The item and `True`, or `(None, False)` if no item
        matched.

    Example:

        >>> find(lambda x: x > 1, [1, 2, 3])
        (2, True)
        >>> find(lambda x: x > 5, [1, 2, 3])
        (None, False)
    """
    return _find(pred, sequence, "find")


def _find(pred, sequence, operation):
    sequence = as_sequence(sequence)
    i = _find_index(pred, sequence, operation)
    if i < 0:
        return None, False

    return sequence[i], True


def find_default(pred, sequence, default):
    """Return the first item satisfying `pred` or `default`."""
    value, found = _find(pred, sequence, "find_default")
    return value if found else default


def find_last(pred, sequence):
    """Return the last item satisfying a predicate.

    Same as :func:`find` but scanning from the end.
    """
    return _find_last(pred, sequence, "find_last")


def _find_last(pred, sequence, operation):
    sequence = as_sequence(sequence)
    i = _find_last_index(pred, sequence, operation)
    if i < 0:
        return None, False

    return sequence[i], True


def find_last_default(pred, sequence, default):
    """Return the last item satisfying `pred` or `default`."""
    value, found = _find_last(pred, sequence, "find_last_default")
    return value if found else default


def index_of(sequence, value):
    """Return the index of the first item equal to `value` or -1."""
    for i, v in enumerate(as_sequence(sequence)):
        if v == value:
            return i

    return -1


def index_of_from(sequence, value, start):
    """Return the index of the first item equal to `value` from `start`.

    Returns -1 when `value` does not appear at or after `start`, including
    when `start` lies past the end of the sequence.
    """
    if not isint(start):
        raise TypeError(
            "index_of_from indices must be integers, not "
            + start.__class__.__name__)
    if start < 0:
        raise IndexError("index_of_from index out of range")

    sequence = as_sequence(sequence)
    for i in range(start, len(sequence)):
        if sequence[i] == value:
            return i

    return -1


def last_index_of(sequence, value):
    """Return the index of the last item equal to `value` or -1."""
    sequence = as_sequence(sequence)
    for i in range(len(sequence) - 1, -1, -1):
        if sequence[i] == value:
            return i

    return -1


def includes(sequence, value):
    return index_of(sequence, value) >= 0


def equals(a, b):
    """Return wether two sequences hold equal items in the same order."""
    a, b = as_sequence(a), as_sequence(b)
    if len(a) != len(b):
        return False

    for x, y in zip(a, b):
        if x != y:
            return False

    return True


def equals_any_order(a, b):
    """Return wether two sequences hold the same items, in any order.

    Items are compared as multisets, so duplicates must appear the same
    number of times in both sequences. Items must be hashable.

    Example:

        >>> equals_any_order([1, 2, 2, 3], [2, 3, 1, 2])
        True
        >>> equals_any_order([1, 1, 2], [1, 2, 2])
        False
    """
    a, b = as_sequence(a), as_sequence(b)
    if len(a) != len(b):
        return False

    return Counter(a) == Counter(b)


def most(better, sequence, default=None):
    """Return the item that ranks highest according to `better`.

    Args:
        better (Callable[[Any, Any], bool]):
            Called as `better(candidate, best)`, must return true when
            `candidate` should replace the current best item.
        sequence (Sequence):
            The searched sequence.
        default (Any):
            Value returned when `sequence` is empty (default None).

    Return:
        The best item. Ties keep the earliest item unless `better`
        returns true for them.

    Example:

        >>> most(lambda v, best: v > best, [3, 7, 2, 7])
        7
        >>> most(lambda v, best: len(v) < len(best), ["abc", "de", "fg"])
        'de'
    """
    better = Callback(better, "most")
    sequence = as_sequence(sequence)
    if len(sequence) == 0:
        return default

    best = sequence[0]
    for i in range(1, len(sequence)):
        if better(i, sequence[i], best):
            best = sequence[i]

    return best
