"""Call-scoped memo tables for the command scorer.

A memo table maps ``(item_index, pattern_index)`` to the best score for the
remaining suffixes. A table belongs to exactly one top-level scoring call.

:class:`MemoPool` recycles table instances to reduce allocation churn when a
caller scores many candidates. The pool only ever hands out empty tables and
clears every table it takes back, so results never leak between unrelated
string pairs. No module-level pool exists: callers that want pooling create
one and pass it in.
"""

from __future__ import annotations
import logging
from contextlib import contextmanager
from threading import Lock
from typing import Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)

MemoKey = Tuple[int, int]
MemoTable = Dict[MemoKey, float]


class MemoPool:
    """Thread-safe pool of memo tables.

    Tables are handed out through :meth:`acquire`, a context manager that
    guarantees the table is cleared and returned on every exit path.

    Example usage:
        pool = MemoPool(max_idle=8)
        with pool.acquire() as memo:
            ...  # memo is empty and owned by this block only
    """

    def __init__(self, max_idle: int = 16):
        """Initialize the pool.

        Args:
            max_idle: Maximum number of cleared tables kept for reuse. Tables
                released while the pool is full are dropped.

        Raises:
            ValueError: If max_idle is negative
        """
        if max_idle < 0:
            raise ValueError(f"max_idle must be >= 0, got {max_idle}")
        self.max_idle = max_idle
        self._idle: List[MemoTable] = []
        self.lock = Lock()

    @property
    def idle_count(self) -> int:
        with self.lock:
            return len(self._idle)

    def _take(self) -> MemoTable:
        with self.lock:
            if self._idle:
                return self._idle.pop()
        return {}

    def _give_back(self, table: MemoTable) -> None:
        table.clear()
        with self.lock:
            if len(self._idle) < self.max_idle:
                self._idle.append(table)
                return
        logger.debug("Memo pool full (%d idle), dropping table", self.max_idle)

    @contextmanager
    def acquire(self) -> Iterator[MemoTable]:
        """Yield an empty, exclusively-owned memo table."""
        table = self._take()
        try:
            yield table
        finally:
            self._give_back(table)


__all__ = ["MemoKey", "MemoTable", "MemoPool"]
