from .ops import (
    count,
    all_match,
    any_match,
    take_while,
    skip_while,
    for_each,
    map_each,
    filter_by,
    flatten,
    group_by,
    negate,
)
from .chunk import ChunkResult, chunk, try_chunk
from .errors import SeqToolsError, InvalidArgument
from .result import Result, Ok, Err, attempt
from .seq import Seq
from .context import Context, current_context, use_context
from .logger import ConsoleLogger
from .metrics import MetricsRegistry, Counter, Histogram
from .instrument import instrumented
from .types import Predicate, Transform, KeyFn

__version__ = "0.1.0"
