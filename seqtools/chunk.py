from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, List, Sequence, TypeVar

from .errors import InvalidArgument, SeqToolsError
from .instrument import instrumented
from .result import Result, attempt

T = TypeVar("T")


@dataclass(frozen=True)
class ChunkResult(Generic[T]):
    """Outcome of partitioning a sequence with ``chunk``.

    Attributes:
        chunks: Contiguous groups of at most ``chunk_size`` elements
        chunk_size: The requested group size
        total: Number of elements in the original sequence
        remainder: Size of the last group when ``total`` is not a multiple
            of ``chunk_size``, 0 otherwise
    """
    chunks: List[List[T]]
    chunk_size: int
    total: int
    remainder: int

    def flatten(self) -> List[T]:
        out: List[T] = []
        for c in self.chunks:
            out.extend(c)
        return out

    def __iter__(self) -> Iterator[List[T]]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)


def _check_size(size: object) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidArgument("chunk size", size)
    return size


@instrumented("chunk")
def chunk(seq: Sequence[T], size: int) -> ChunkResult[T]:
    """Split ``seq`` into contiguous groups of at most ``size`` elements.

    Only the last group may be shorter. An empty input gives no groups.

    Raises:
        InvalidArgument: ``size`` is not a positive integer

    >>> chunk([1, 2, 3, 4, 5], 3)
    ChunkResult(chunks=[[1, 2, 3], [4, 5]], chunk_size=3, total=5, remainder=2)
    """
    size = _check_size(size)
    total = len(seq)
    n_chunks = (total + size - 1) // size
    chunks = [list(seq[i * size:(i + 1) * size]) for i in range(n_chunks)]
    return ChunkResult(chunks=chunks, chunk_size=size, total=total, remainder=total % size)


def try_chunk(seq: Sequence[T], size: int) -> Result[SeqToolsError, ChunkResult[T]]:
    """``chunk`` that returns ``Err(InvalidArgument)`` instead of raising."""
    return attempt(chunk, seq, size)
