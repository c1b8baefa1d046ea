from .errors import Callback
from .utils import as_sequence


def smap(f, sequence):
    """Return a list of `f` applied to every item of the sequence.

    Equivalent to :code:`[f(x) for x in sequence]` except that an
    absent sequence (`None`) gives `None` back.

    Example:

        >>> smap(lambda x: x * 2, [1, 2, 3])
        [2, 4, 6]
        >>> smap(str, []) == []
        True
        >>> smap(str, None) is None
        True
    """
    f = Callback(f, "smap")
    if sequence is None:
        return None

    return [f(i, v) for i, v in enumerate(sequence)]


def sfilter(pred, sequence):
    """Return the items satisfying `pred`, in their original order.

    An absent sequence (`None`) gives `None` back.

    Example:

        >>> sfilter(lambda x: x > 1, [1, 2, 3])
        [2, 3]
    """
    pred = Callback(pred, "sfilter")
    if sequence is None:
        return None

    return [v for i, v in enumerate(sequence) if pred(i, v)]


def filter_map(pred, f, sequence):
    """Map `f` over the items satisfying `pred`.

    Same as :code:`smap(f, sfilter(pred, sequence))` but without the
    intermediate list, `f` is only evaluated on retained items.
    """
    pred = Callback(pred, "filter_map")
    f = Callback(f, "filter_map")
    if sequence is None:
        return None

    return [f(i, v) for i, v in enumerate(sequence) if pred(i, v)]


def for_each(f, sequence):
    """Call `f` on every item."""
    f = Callback(f, "for_each")
    for i, v in enumerate(as_sequence(sequence)):
        f(i, v)


def for_each_index(f, sequence):
    """Call `f(value, index)` on every item."""
    f = Callback(f, "for_each_index")
    for i, v in enumerate(as_sequence(sequence)):
        f(i, v, i)


def reduce(f, sequence, initial):
    """Fold a sequence from left to right.

    Args:
        f (Callable[[Any, Any], Any]):
            Called as `f(item, accumulator)`, returns the new
            accumulator value. Note that the argument order differs
            from :func:`python:functools.reduce`.
        sequence (Sequence):
            The items to accumulate, index 0 first.
        initial (Any):
            Initial accumulator value, returned as is for an empty
            sequence.

    Example:

        >>> reduce(lambda v, acc: acc + [v], [1, 2, 3], [])
        [1, 2, 3]
    """
    f = Callback(f, "reduce")
    acc = initial
    for i, v in enumerate(as_sequence(sequence)):
        acc = f(i, v, acc)

    return acc


def reduce_right(f, sequence, initial):
    """Fold a sequence from right to left.

    Same as :func:`reduce` except that items are visited from the last
    one down to index 0.

    Example:

        >>> reduce_right(lambda v, acc: acc + [v], [1, 2, 3], [])
        [3, 2, 1]
    """
    f = Callback(f, "reduce_right")
    sequence = as_sequence(sequence)
    acc = initial
    for i in range(len(sequence) - 1, -1, -1):
        acc = f(i, sequence[i], acc)

    return acc


def ssum(sequence):
    """Return the sum of the items, 0 for an empty sequence."""
    total = 0
    for v in as_sequence(sequence):
        total += v

    return total
