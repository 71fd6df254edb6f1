from __future__ import annotations
import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator, TypeVar

A = TypeVar("A")


class Context:
    """Type-keyed, immutable container for the services seqtools may use.

    Operations never require a context. When one is active (see
    ``use_context``) they look up optional services such as a
    ``ConsoleLogger`` or a ``MetricsRegistry`` by type.

    Args:
        values: Optional initial services dictionary

    Example:
        ```python
        ctx = (Context()
               .with_service(ConsoleLogger, ConsoleLogger(level="DEBUG"))
               .with_service(MetricsRegistry, MetricsRegistry()))

        with use_context(ctx):
            chunk([1, 2, 3], 2)
        ```
    """
    def __init__(self, values: Dict[type, Any] | None = None): self._values = dict(values or {})

    def get(self, t: type[A]) -> A:
        """Get a service by type.

        Raises:
            KeyError: If the service type is not available
        """
        if t not in self._values: raise KeyError(f"Missing service: {t}")
        return self._values[t]

    def find(self, t: type[A]) -> A | None:
        """Like ``get`` but returns ``None`` for a missing service."""
        return self._values.get(t)

    def add(self, t: type[A], v: A) -> "Context":
        """Return a new Context with ``v`` registered under ``t``.

        The original context is unchanged.
        """
        c = dict(self._values); c[t] = v; return Context(c)

    def with_service(self, t: type[A], v: A) -> "Context":
        """Alias for ``add``."""
        return self.add(t, v)

    def __contains__(self, t: object) -> bool:
        return t in self._values

    def __len__(self) -> int:
        return len(self._values)


_EMPTY = Context()
_current: contextvars.ContextVar[Context] = contextvars.ContextVar("seqtools_context", default=_EMPTY)


def current_context() -> Context:
    return _current.get()


@contextmanager
def use_context(ctx: Context) -> Iterator[Context]:
    """Install ``ctx`` as the active context for the body of a ``with`` block."""
    token = _current.set(ctx)
    try:
        yield ctx
    finally:
        _current.reset(token)
