"""In-place operations.

These functions modify the sequence they are given and return nothing.
They work on any mutable sequence with integer item assignment, such as
lists, :class:`python:array.array` or one-dimensional numpy arrays.
"""

import functools

from .errors import Callback
from .utils import as_sequence, check_index, check_range


def fill(sequence, value):
    """Set every item of the sequence to `value`."""
    if sequence is None:
        return

    for i in range(len(sequence)):
        sequence[i] = value


def fill_range(sequence, value, start, end):
    """Set the items in `[start, end)` to `value`.

    Raises:
        IndexError: unless :code:`0 <= start <= end <= len(sequence)`.
    """
    check_range(as_sequence(sequence), start, end, "fill_range")

    for i in range(start, end):
        sequence[i] = value


def reverse(sequence):
    """Reverse the order of the items."""
    if sequence is None:
        return

    i, j = 0, len(sequence) - 1
    while i < j:
        sequence[i], sequence[j] = sequence[j], sequence[i]
        i += 1
        j -= 1


def move(sequence, source, target):
    """Move the item at index `source` to index `target`.

    Items in between are shifted by one position to fill the gap.

    Example:

        >>> data = [1, 2, 3, 4]
        >>> move(data, 0, 3)
        >>> data
        [2, 3, 4, 1]
        >>> move(data, 3, 1)
        >>> data
        [2, 1, 3, 4]
    """
    check_index(as_sequence(sequence), source, "move")
    check_index(as_sequence(sequence), target, "move")

    if source == target:
        return

    value = sequence[source]
    if source < target:
        for i in range(source, target):
            sequence[i] = sequence[i + 1]
    else:
        for i in range(source, target, -1):
            sequence[i] = sequence[i - 1]

    sequence[target] = value


def sort(less, sequence):
    """Sort the items in increasing order.

    Args:
        less (Callable[[Any, Any], bool]):
            Returns true when its first argument must come before the
            second one.
        sequence (MutableSequence):
            The sequence to sort.

    The sort is stable: items that compare equal keep their relative
    order.
    """
    less = Callback(less, "sort")
    if sequence is None:
        return

    def compare(a, b):
        if less(None, a, b):
            return -1
        elif less(None, b, a):
            return 1
        else:
            return 0

    values = sorted(sequence, key=functools.cmp_to_key(compare))
    for i, v in enumerate(values):
        sequence[i] = v
