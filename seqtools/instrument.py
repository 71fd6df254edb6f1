from __future__ import annotations
import functools
import time
from typing import Any, Callable, TypeVar

from .context import current_context
from .logger import ConsoleLogger
from .metrics import MetricsRegistry

F = TypeVar("F", bound=Callable[..., Any])


def _size(args: tuple) -> int | None:
    try:
        return len(args[0])
    except (IndexError, TypeError):
        return None


def instrumented(name: str) -> Callable[[F], F]:
    """Add opt-in observability to a sequence operation.

    The wrapped function looks up a ``ConsoleLogger`` and a
    ``MetricsRegistry`` in the active context. Without either, it is a
    plain call. With a logger it emits ``start``/``end`` records at DEBUG
    and a ``fail`` record at ERROR; with a registry it counts calls and
    errors and records durations, labelled with ``op=<name>``.

    Results and exceptions pass through untouched.

    Example:
        ```python
        @instrumented("count")
        def count(seq, value): ...

        ctx = Context().add(ConsoleLogger, ConsoleLogger(level="DEBUG"))
        with use_context(ctx):
            count([1, 2, 1], 1)
        ```
    """
    def decorate(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ctx = current_context()
            logger = ctx.find(ConsoleLogger)
            metrics = ctx.find(MetricsRegistry)
            if logger is None and metrics is None:
                return fn(*args, **kwargs)

            labels = (("op", name),)
            if metrics:
                metrics.counter("seqtools_calls_total", help="Number of operation calls", labels=labels).inc()
            if logger: logger.debug(f"start {name}", size=_size(args))
            t0 = time.perf_counter()
            try:
                res = fn(*args, **kwargs)
            except BaseException as ex:
                if logger: logger.error(f"fail {name}: {ex}", error=type(ex).__name__)
                if metrics:
                    metrics.counter("seqtools_errors_total", help="Number of failed operation calls", labels=labels).inc()
                raise
            finally:
                elapsed = max(0.0, time.perf_counter() - t0)
                if metrics:
                    metrics.histogram("seqtools_op_duration_seconds", help="Duration of operation calls", labels=labels).observe(elapsed)
            if logger: logger.debug(f"end {name}")
            return res
        return wrapper  # type: ignore[return-value]
    return decorate
