from __future__ import annotations
from typing import Any


class SeqToolsError(Exception):
    """Base class for errors raised by seqtools itself."""


class InvalidArgument(SeqToolsError, ValueError):
    def __init__(self, name: str, value: Any, reason: str = "you must provide a positive integer"):
        super().__init__(f"{value!r} is not a valid {name}, {reason}")
        self.name = name; self.value = value
