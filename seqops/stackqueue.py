"""Stack and queue helpers.

None of these functions modify their input, they return a new list
instead.
"""

from .utils import as_sequence


def push(sequence, value):
    """Return a new list with `value` appended."""
    return list(as_sequence(sequence)) + [value]


def pop(sequence, default=None):
    """Split off the last item.

    Return:
        (Any, list): The last item and a list of the items before it, or
        `(default, [])` if the sequence is empty.

    Example:

        >>> pop([1, 2, 3])
        (3, [1, 2])
    """
    if sequence is None or len(sequence) == 0:
        return default, []

    return sequence[-1], list(sequence[:-1])


def shift(sequence, default=None):
    """Split off the first item.

    Return:
        (Any, list): The first item and a list of the items after it, or
        `(default, [])` if the sequence is empty.
    """
    if sequence is None or len(sequence) == 0:
        return default, []

    return sequence[0], list(sequence[1:])


def unshift(sequence, value):
    """Return a new list with `value` prepended."""
    return [value] + list(as_sequence(sequence))
