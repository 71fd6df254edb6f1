"""Single-pass operations over materialized sequences.

Every function takes a ``Sequence`` and never mutates it. Operations
that produce a sequence always return a fresh ``list``. Exceptions
raised by user callbacks propagate unchanged.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Sequence

from .instrument import instrumented
from .types import K, KeyFn, Predicate, T, Transform, U


def negate(predicate: Predicate[T]) -> Predicate[T]:
    def negated(x: T) -> bool:
        return not predicate(x)
    return negated


@instrumented("count")
def count(seq: Sequence[T], value: T) -> int:
    """Number of elements equal to ``value``."""
    n = 0
    for item in seq:
        if item == value:
            n += 1
    return n


@instrumented("all_match")
def all_match(seq: Sequence[T], predicate: Predicate[T]) -> bool:
    """True when every element satisfies ``predicate`` (vacuously true when empty).

    Stops at the first failing element.
    """
    for item in seq:
        if not predicate(item):
            return False
    return True


@instrumented("any_match")
def any_match(seq: Sequence[T], predicate: Predicate[T]) -> bool:
    """True when at least one element satisfies ``predicate``; stops at the first one."""
    for item in seq:
        if predicate(item):
            return True
    return False


@instrumented("take_while")
def take_while(seq: Sequence[T], predicate: Predicate[T]) -> List[T]:
    """Longest prefix whose elements all satisfy ``predicate``.

    >>> take_while(["foo", "bar", "aba", "z", "45"], lambda s: len(s) == 3)
    ['foo', 'bar', 'aba']
    """
    out: List[T] = []
    for item in seq:
        if not predicate(item):
            break
        out.append(item)
    return out


@instrumented("skip_while")
def skip_while(seq: Sequence[T], predicate: Predicate[T]) -> List[T]:
    """Suffix starting at the first element that fails ``predicate``.

    >>> skip_while(["foo", "bar", "aba", "z", "45"], lambda s: len(s) == 3)
    ['z', '45']
    """
    for i, item in enumerate(seq):
        if not predicate(item):
            return list(seq[i:])
    return []


@instrumented("for_each")
def for_each(seq: Sequence[T], fn: Callable[[T], object]) -> None:
    for item in seq:
        fn(item)


@instrumented("map_each")
def map_each(seq: Sequence[T], fn: Transform[T, U]) -> List[U]:
    return [fn(item) for item in seq]


@instrumented("filter_by")
def filter_by(seq: Sequence[T], predicate: Predicate[T]) -> List[T]:
    return [item for item in seq if predicate(item)]


@instrumented("flatten")
def flatten(nested: Sequence[Sequence[T]]) -> List[T]:
    """Concatenate inner sequences in order.

    >>> flatten([[1, 2, 3], [], [4, 5, 6]])
    [1, 2, 3, 4, 5, 6]
    """
    out: List[T] = []
    for inner in nested:
        out.extend(inner)
    return out


@instrumented("group_by")
def group_by(seq: Sequence[T], key_fn: KeyFn[T, K]) -> Dict[K, List[T]]:
    """Map each key produced by ``key_fn`` to the elements that produced it.

    Elements keep their original relative order inside each group. The
    order of the keys themselves is not part of the contract.

    >>> group_by(["a", "aa", "b", "bbb"], len)
    {1: ['a', 'b'], 2: ['aa'], 3: ['bbb']}
    """
    groups: Dict[K, List[T]] = {}
    for item in seq:
        groups.setdefault(key_fn(item), []).append(item)
    return groups
