from __future__ import annotations
from typing import Callable, Hashable, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

Predicate = Callable[[T], bool]
Transform = Callable[[T], U]
KeyFn = Callable[[T], K]
