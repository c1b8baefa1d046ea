"""Operations that assemble sequences or their elements."""

import itertools
from collections import namedtuple

from .mapping import smap
from .utils import as_sequence, isint


Zipped = namedtuple("Zipped", ["a", "b"])
Zipped.__doc__ = "Pair of items taken at the same position in two sequences."


def concat(*sequences):
    """Return a new list with the items of all sequences in order.

    Example:

        >>> concat([0, 1, 2, 3], [4, 5], [6, 7])
        [0, 1, 2, 3, 4, 5, 6, 7]
    """
    return list(itertools.chain.from_iterable(
        as_sequence(seq) for seq in sequences))


def flatten(sequences):
    """Concatenate the sub-sequences of a 2D sequence.

    An absent outer sequence (`None`) gives `None` back, absent inner
    sequences are treated as empty.

    Example:

        >>> flatten([[1, 2], [], [3]])
        [1, 2, 3]
    """
    if sequences is None:
        return None

    return concat(*sequences)


def flat_map(f, sequence):
    """Map `f` over the items then concatenate the resulting sequences.

    Example:

        >>> flat_map(lambda x: [x] * x, [1, 2, 3])
        [1, 2, 2, 3, 3, 3]
    """
    return flatten(smap(f, sequence))


def chunk(sequence, size):
    """Split a sequence into consecutive blocks of `size` items.

    Args:
        sequence (Sequence):
            The input sequence.
        size (int):
            Maximum number of items by block, at least 1.

    Return:
        List[list]: :code:`ceil(len(sequence) / size)` blocks, all of
        which hold `size` items except for the last one which can be
        shorter.

    Example:

        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if not isint(size):
        raise TypeError(
            "size must be an integer, not " + size.__class__.__name__)
    if size < 1:
        raise ValueError("size must be a positive integer")

    sequence = as_sequence(sequence)
    n = (len(sequence) + size - 1) // size
    return [list(sequence[i * size:(i + 1) * size]) for i in range(n)]


def szip(a, b):
    """Pair items from two sequences by position.

    The result is as long as the shortest sequence, trailing items of
    the longest one are dropped.

    Example:

        >>> szip([1, 2, 3], [-1, -2])
        [Zipped(a=1, b=-1), Zipped(a=2, b=-2)]
    """
    return [Zipped(x, y) for x, y in zip(as_sequence(a), as_sequence(b))]


def clone(sequence):
    """Return a shallow copy of the sequence as a new list."""
    return list(as_sequence(sequence))


def reverse_copy(sequence):
    """Return a new list with the items in reverse order."""
    sequence = as_sequence(sequence)
    return [sequence[i] for i in range(len(sequence) - 1, -1, -1)]


def no_nil(sequence):
    """Return `sequence`, or a new empty list if it is `None`."""
    return [] if sequence is None else sequence


def dedup(sequence):
    """Return the first occurrence of every item, in order of appearance.

    Items must be hashable. An absent sequence (`None`) gives `None`
    back.

    Example:

        >>> dedup([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    if sequence is None:
        return None

    seen = set()
    out = []
    for v in sequence:
        if v not in seen:
            seen.add(v)
            out.append(v)

    return out
