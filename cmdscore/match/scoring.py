"""Fuzzy relevance scoring of a command label against a typed abbreviation.

This module scores how well a short pattern (what the user typed) aligns
inside a longer item (e.g. a command-palette label). The result is a float in
[0, 1]: 1.0 for a continuous, case-exact match consuming the whole item, 0.0
when no alignment exists.

Design goals:
- Depth-first alignment search, memoized per (item_index, pattern_index)
- Multiplicative weights so that continuous runs stay at 1.0
- Pure / side-effect free: the memo table is scoped to one call
- Weights overridable through ScoringConfig for experimentation

It does NOT sort or filter candidates; callers score each pair and order the
results themselves.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .memo import MemoPool, MemoTable
from ..utils.normalization import (
    count_gaps,
    count_spaces,
    format_input,
    is_gap,
    is_space,
)

logger = logging.getLogger(__name__)

# --- Default Weights -------------------------------------------------------

# Contiguous match (or a match at the very start of the remaining item).
SCORE_CONTINUE_MATCH = 1.0
# New match right after whitespace, or after a gap character.
SCORE_SPACE_WORD_JUMP = 0.9
SCORE_NON_SPACE_WORD_JUMP = 0.8
# New match in the middle of a token.
SCORE_CHARACTER_JUMP = 0.3
# Two adjacent pattern characters typed in swapped order.
SCORE_TRANSPOSITION = 0.1
# Decay per skipped character; only reorders results over ~100 characters.
PENALTY_SKIPPED = 0.999
# Matched only after case folding; only reorders results over ~1000 characters.
PENALTY_CASE_MISMATCH = 0.9999
# Pattern fully consumed but the item has trailing characters.
PENALTY_NOT_COMPLETE = 0.99

# --- Scoring Configuration -------------------------------------------------

@dataclass(frozen=True)
class ScoringConfig:
    """Weights and penalties applied by the alignment search.

    All values are multiplicative factors in (0, 1]. The defaults are the
    tuned values above; changing them changes scores but never the shape of
    the search.
    """
    score_continue_match: float = SCORE_CONTINUE_MATCH
    score_space_word_jump: float = SCORE_SPACE_WORD_JUMP
    score_non_space_word_jump: float = SCORE_NON_SPACE_WORD_JUMP
    score_character_jump: float = SCORE_CHARACTER_JUMP
    score_transposition: float = SCORE_TRANSPOSITION
    penalty_skipped: float = PENALTY_SKIPPED
    penalty_case_mismatch: float = PENALTY_CASE_MISMATCH
    penalty_not_complete: float = PENALTY_NOT_COMPLETE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{f.name} must be in (0, 1], got {value}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for config display."""
        return asdict(self)


DEFAULT_CONFIG = ScoringConfig()

# --- Alignment Search ------------------------------------------------------

def _char_at(text: str, index: int) -> Optional[str]:
    if 0 <= index < len(text):
        return text[index]
    return None


@dataclass
class _Frame:
    """One pending (item_index, pattern_index) subproblem on the search stack."""
    item_index: int
    pattern_index: int
    index: int
    high_score: float = 0.0
    score: float = 0.0
    continued: bool = False


def _resolved(
    item_index: int,
    pattern_index: int,
    item_len: int,
    pattern_len: int,
    memo: MemoTable,
    cfg: ScoringConfig,
) -> Optional[float]:
    """Score of a subproblem if it is a base case or already memoized, else None."""
    if pattern_index == pattern_len:
        if item_index == item_len:
            return cfg.score_continue_match
        return cfg.penalty_not_complete
    return memo.get((item_index, pattern_index))


def _weigh_jump(
    item: str,
    pattern: str,
    item_index: int,
    pattern_index: int,
    index: int,
    score: float,
    cfg: ScoringConfig,
) -> float:
    """Scale a continuation score by the boundary before ``index`` and case."""
    if index == item_index:
        score *= cfg.score_continue_match
    elif is_gap(item[index - 1]):
        score *= cfg.score_non_space_word_jump
        skipped = count_gaps(item[item_index:index - 1])
        if skipped > 0 and item_index > 0:
            score *= cfg.penalty_skipped ** skipped
    elif is_space(item[index - 1]):
        score *= cfg.score_space_word_jump
        skipped = count_spaces(item[item_index:index - 1])
        if skipped > 0 and item_index > 0:
            score *= cfg.penalty_skipped ** skipped
    else:
        score *= cfg.score_character_jump
        if item_index > 0:
            score *= cfg.penalty_skipped ** (index - item_index)

    if item[index] != pattern[pattern_index]:
        score *= cfg.penalty_case_mismatch
    return score


def _may_transpose(lower_item: str, lower_pattern: str, index: int, pattern_index: int) -> bool:
    pattern_char = lower_pattern[pattern_index]
    before = _char_at(lower_item, index - 1)
    following = _char_at(lower_pattern, pattern_index + 1)
    if before is None:
        return False
    if before == following:
        return True
    # duplicated letter in the pattern may align with a single one in the item
    return following == pattern_char and before != pattern_char


def _search(
    item: str,
    pattern: str,
    lower_item: str,
    lower_pattern: str,
    memo: MemoTable,
    cfg: ScoringConfig,
) -> float:
    """Best score for aligning ``pattern`` inside ``item``.

    Depth-first search over (item_index, pattern_index) subproblems, driven by
    an explicit stack so that pattern length is not bounded by the interpreter
    recursion limit. A frame waiting on a subproblem pushes it and retries the
    same step once the subproblem is memoized.
    """
    item_len = len(item)
    pattern_len = len(pattern)
    # no subproblem can score above the better base case
    ceiling = max(cfg.score_continue_match, cfg.penalty_not_complete)

    def new_frame(item_index: int, pattern_index: int) -> _Frame:
        index = lower_item.find(lower_pattern[pattern_index], item_index)
        return _Frame(item_index, pattern_index, index)

    root = _resolved(0, 0, item_len, pattern_len, memo, cfg)
    if root is not None:
        return root

    stack = [new_frame(0, 0)]
    while stack:
        frame = stack[-1]
        if frame.index < 0 or frame.high_score >= ceiling:
            memo[(frame.item_index, frame.pattern_index)] = frame.high_score
            stack.pop()
            continue

        index = frame.index
        pattern_index = frame.pattern_index

        if not frame.continued:
            score = _resolved(index + 1, pattern_index + 1, item_len, pattern_len, memo, cfg)
            if score is None:
                stack.append(new_frame(index + 1, pattern_index + 1))
                continue
            if score > frame.high_score:
                score = _weigh_jump(item, pattern, frame.item_index, pattern_index, index, score, cfg)
            frame.score = score
            frame.continued = True

        if frame.score < cfg.score_transposition and _may_transpose(
            lower_item, lower_pattern, index, pattern_index
        ):
            transposed = _resolved(index + 1, pattern_index + 2, item_len, pattern_len, memo, cfg)
            if transposed is None:
                stack.append(new_frame(index + 1, pattern_index + 2))
                continue
            transposed *= cfg.score_transposition
            if transposed > frame.score:
                frame.score = transposed

        if frame.score > frame.high_score:
            frame.high_score = frame.score
        frame.index = lower_item.find(lower_pattern[pattern_index], index + 1)
        frame.continued = False

    return memo[(0, 0)]


def _run(item: str, pattern: str, memo: MemoTable, cfg: ScoringConfig) -> float:
    if not pattern:
        return cfg.score_continue_match
    score = _search(item, pattern, format_input(item), format_input(pattern), memo, cfg)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"command_score item_len={len(item)} pattern_len={len(pattern)} "
            f"score={score:.6f} memo_entries={len(memo)}"
        )
    return score

# --- Public API ------------------------------------------------------------

def command_score(
    item: str,
    pattern: str,
    config: ScoringConfig | None = None,
    pool: MemoPool | None = None,
) -> float:
    """Score how well ``pattern`` abbreviates ``item``.

    Args:
        item: Full candidate text (e.g. a command label)
        pattern: Short user-typed text to align inside ``item``
        config: Weights to use (defaults to the tuned constants)
        pool: Optional memo pool; without one a fresh table is allocated

    Returns:
        Score in [0, 1]. 1.0 for an exact match, 0.0 when the pattern cannot
        be aligned. An empty pattern matches anything with 1.0.

    Raises:
        TypeError: If item or pattern is not a str
    """
    if not isinstance(item, str) or not isinstance(pattern, str):
        raise TypeError(
            f"item and pattern must be str, got {type(item).__name__} and {type(pattern).__name__}"
        )
    cfg = config or DEFAULT_CONFIG
    if pool is None:
        return _run(item, pattern, {}, cfg)
    with pool.acquire() as memo:
        return _run(item, pattern, memo, cfg)


class CommandScorer:
    """Scorer bound to one configuration and an optional memo pool.

    Useful when scoring many labels against the same typed pattern:

        scorer = CommandScorer(pool=MemoPool())
        scores = {label: scorer.score(label, "gtf") for label in labels}

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, config: ScoringConfig | None = None, pool: MemoPool | None = None):
        self.config = config or DEFAULT_CONFIG
        self.pool = pool

    def score(self, item: str, pattern: str) -> float:
        return command_score(item, pattern, self.config, self.pool)

    def __call__(self, item: str, pattern: str) -> float:
        return self.score(item, pattern)


__all__ = [
    "SCORE_CONTINUE_MATCH",
    "SCORE_SPACE_WORD_JUMP",
    "SCORE_NON_SPACE_WORD_JUMP",
    "SCORE_CHARACTER_JUMP",
    "SCORE_TRANSPOSITION",
    "PENALTY_SKIPPED",
    "PENALTY_CASE_MISMATCH",
    "PENALTY_NOT_COMPLETE",
    "ScoringConfig",
    "DEFAULT_CONFIG",
    "command_score",
    "CommandScorer",
]
