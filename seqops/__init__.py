"""
A python library of functional helpers for sequences and dictionaries.

The seqops package contains small, independent functions to query,
transform and rearrange sequences (anything that supports `len` and
integer indexing such as lists, tuples or arrays) and to group their
items into dictionaries.

Unless otherwise specified, functions leave their inputs untouched and
return new lists. The functions in :mod:`seqops.mutation` as well as
:func:`shuffle` work in place instead.

Searches signal missing items with sentinels (-1, a `found` flag or a
default value) rather than exceptions, while invalid indices or sizes
raise immediately.
"""

from .errors import EvaluationError, seterr
from .grid import expand_2d, make_2d
from .grouping import group, group_map, keys, values
from .indexing import arange, insert, remove, remove_func, remove_index
from .mapping import (
    filter_map,
    for_each,
    for_each_index,
    reduce,
    reduce_right,
    sfilter,
    smap,
    ssum,
)
from .mutation import fill, fill_range, move, reverse, sort
from .randomness import get_rng, random_pick, seed, shuffle
from .search import (
    count,
    equals,
    equals_any_order,
    every,
    find,
    find_default,
    find_index,
    find_last,
    find_last_default,
    find_last_index,
    includes,
    index_of,
    index_of_from,
    last_index_of,
    most,
    some,
)
from .shape import (
    Zipped,
    chunk,
    clone,
    concat,
    dedup,
    flat_map,
    flatten,
    no_nil,
    reverse_copy,
    szip,
)
from .stackqueue import pop, push, shift, unshift

__all__ = [
    "EvaluationError",
    "seterr",
    "count",
    "every",
    "some",
    "find",
    "find_default",
    "find_index",
    "find_last",
    "find_last_default",
    "find_last_index",
    "index_of",
    "index_of_from",
    "last_index_of",
    "includes",
    "equals",
    "equals_any_order",
    "most",
    "smap",
    "sfilter",
    "filter_map",
    "for_each",
    "for_each_index",
    "reduce",
    "reduce_right",
    "ssum",
    "Zipped",
    "concat",
    "flatten",
    "flat_map",
    "chunk",
    "szip",
    "clone",
    "reverse_copy",
    "no_nil",
    "dedup",
    "arange",
    "insert",
    "remove",
    "remove_func",
    "remove_index",
    "fill",
    "fill_range",
    "reverse",
    "move",
    "sort",
    "seed",
    "get_rng",
    "shuffle",
    "random_pick",
    "push",
    "pop",
    "shift",
    "unshift",
    "group",
    "group_map",
    "keys",
    "values",
    "make_2d",
    "expand_2d",
]
