from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Iterable, Iterator, List, Tuple, TypeVar, overload

from . import ops
from .chunk import ChunkResult, chunk

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class Seq(Generic[T]):
    """Immutable, chainable view over the module-level operations.

    >>> Seq.of(1, 2, 3, 4).filter(lambda x: x % 2 == 0).map(str).to_list()
    ['2', '4']
    """
    _items: Tuple[T, ...]

    @staticmethod
    def of(*items: T) -> "Seq[T]":
        return Seq(tuple(items))

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "Seq[T]":
        return Seq(tuple(items))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, i: int) -> T: ...
    @overload
    def __getitem__(self, i: slice) -> "Seq[T]": ...
    def __getitem__(self, i):
        if isinstance(i, slice):
            return Seq(self._items[i])
        return self._items[i]

    def to_list(self) -> List[T]:
        return list(self._items)

    def count(self, value: T) -> int:
        return ops.count(self._items, value)

    def all(self, p: Callable[[T], bool]) -> bool:
        return ops.all_match(self._items, p)

    def any(self, p: Callable[[T], bool]) -> bool:
        return ops.any_match(self._items, p)

    def take_while(self, p: Callable[[T], bool]) -> "Seq[T]":
        return Seq(tuple(ops.take_while(self._items, p)))

    def skip_while(self, p: Callable[[T], bool]) -> "Seq[T]":
        return Seq(tuple(ops.skip_while(self._items, p)))

    def for_each(self, f: Callable[[T], object]) -> None:
        ops.for_each(self._items, f)

    def map(self, f: Callable[[T], U]) -> "Seq[U]":
        return Seq(tuple(ops.map_each(self._items, f)))

    def filter(self, p: Callable[[T], bool]) -> "Seq[T]":
        return Seq(tuple(ops.filter_by(self._items, p)))

    def flat_map(self, f: Callable[[T], Iterable[U]]) -> "Seq[U]":
        return Seq(tuple(ops.flatten(ops.map_each(self._items, lambda x: list(f(x))))))

    def chunk(self, size: int) -> ChunkResult[T]:
        return chunk(self._items, size)

    def group_by(self, key: Callable[[T], K]) -> Dict[K, "Seq[T]"]:
        return {k: Seq(tuple(v)) for k, v in ops.group_by(self._items, key).items()}
