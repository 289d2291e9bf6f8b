"""Matching package exposing the command scorer and its memo pool.

The scorer lives in `scoring.py`; call-scoped memo tables and the optional
pool used to recycle them live in `memo.py`.
"""

from .memo import MemoTable, MemoPool
from .scoring import (
    ScoringConfig,
    CommandScorer,
    command_score,
)

__all__ = [
    "MemoTable",
    "MemoPool",
    "ScoringConfig",
    "CommandScorer",
    "command_score",
]
