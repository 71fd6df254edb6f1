from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Iterable, Tuple
import threading


@dataclass
class Counter:
    name: str
    help: str = ""
    labels: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    value: int = 0

    def inc(self, n: int = 1) -> None: self.value += n


@dataclass
class Histogram:
    name: str; help: str = ""; buckets: List[float] = field(default_factory=lambda:[0.0001,0.0005,0.001,0.005,0.01,0.05,0.1,0.5,1.0])
    labels: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    counts: List[int] = field(init=False); sum: float = 0.0; count: int = 0
    def __post_init__(self): self.counts = [0 for _ in self.buckets] + [0]
    def observe(self, v: float) -> None:
        self.sum += v; self.count += 1
        for i, b in enumerate(self.buckets):
            if v <= b: self.counts[i] += 1; return
        self.counts[-1] += 1


class MetricsRegistry:
    """In-memory registry of labelled counters and histograms.

    Keys are ``name`` or ``name|k1=v1,k2=v2`` with labels sorted by key.
    """
    def __init__(self):
        self.counters: Dict[str, Counter] = {}
        self.hists: Dict[str, Histogram] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(name: str, labels: Iterable[Tuple[str, str]] | None) -> str:
        if not labels:
            return name
        return name + "|" + ",".join([f"{k}={v}" for k, v in sorted(labels)])

    def counter(self, name: str, help: str = "", labels: Iterable[Tuple[str, str]] | None = None) -> Counter:
        labels = tuple(sorted(labels or ()))
        with self._lock:
            key = self._key(name, labels)
            c = self.counters.get(key)
            if c is None:
                c = Counter(name, help, labels)
                self.counters[key] = c
            return c

    def histogram(self, name: str, help: str = "", labels: Iterable[Tuple[str, str]] | None = None,
                  buckets: Iterable[float] | None = None) -> Histogram:
        labels = tuple(sorted(labels or ()))
        with self._lock:
            key = self._key(name, labels)
            h = self.hists.get(key)
            if h is None:
                h = Histogram(name, help, labels=labels) if buckets is None else Histogram(name, help, list(buckets), labels)
                self.hists[key] = h
            return h

    def value(self, name: str, labels: Iterable[Tuple[str, str]] | None = None) -> int:
        """Current value of a counter, 0 if it was never created."""
        c = self.counters.get(self._key(name, tuple(sorted(labels or ()))))
        return 0 if c is None else c.value
