"""Random reordering and sampling.

A single generator per thread is created on first use and reused by
every call, which avoids correlated results for calls made in quick
succession. Use :func:`seed` for reproducible runs, or pass an explicit
:class:`python:random.Random` instance as `rng`.
"""

import random
import threading

from .utils import get_logger


logger = get_logger(__name__)


class RandomConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.rng = random.Random()


random_config = RandomConfig()


def seed(a=None):
    """Reseed the generator of the current thread.

    Args:
        a (Optional[int or str or bytes]): Seed value, `None` draws one
            from the operating system.
    """
    logger.debug("reseeding random generator")
    random_config.rng.seed(a)


def get_rng():
    """Return the generator used when no `rng` argument is given."""
    return random_config.rng


def shuffle(sequence, rng=None):
    """Shuffle the items in place.

    Uses the Fisher-Yates algorithm so that every permutation is equally
    likely.

    Args:
        sequence (MutableSequence): The sequence to shuffle.
        rng (Optional[random.Random]): Generator to draw from, defaults
            to the per-thread generator.
    """
    if sequence is None:
        return

    rng = rng or get_rng()
    for i in range(len(sequence) - 1, 0, -1):
        j = rng.randrange(i + 1)
        sequence[i], sequence[j] = sequence[j], sequence[i]


def random_pick(sequence, rng=None, default=None):
    """Draw one item at random.

    Args:
        sequence (Sequence): The sequence to pick from, left unmodified.
        rng (Optional[random.Random]): Generator to draw from, defaults
            to the per-thread generator.
        default (Any): Value returned for an empty sequence.

    Return:
        (Any, list): The picked item and a new list with the remaining
        items. The remaining items are not guaranteed to keep their
        order. An empty sequence gives `(default, [])`.

    Example:

        >>> value, rest = random_pick([1, 2, 3])
        >>> sorted(rest + [value])
        [1, 2, 3]
    """
    if sequence is None or len(sequence) == 0:
        return default, []

    rng = rng or get_rng()
    rest = list(sequence)
    i = rng.randrange(len(rest))
    rest[i], rest[-1] = rest[-1], rest[i]
    value = rest.pop()
    return value, rest
