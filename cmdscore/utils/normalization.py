"""Input normalization and character classes used by the command scorer.

The normalized form of a string is always index-aligned with the original:
``format_input(s)[i]`` corresponds to ``s[i]`` for every ``i``. The scorer
searches the normalized strings and classifies word boundaries by looking at
the original ones, so no character may ever be inserted or dropped here.
"""

from __future__ import annotations

from typing import FrozenSet

# Punctuation treated as a soft word boundary (distinct from whitespace)
GAP_CHARACTERS: FrozenSet[str] = frozenset('\\/_+.#"@[({&')

_SPACE = " "
_HYPHEN = "-"


def fold_char(ch: str) -> str:
    """Lowercase a single character without changing the string length.

    A few code points lowercase to more than one code point (``"İ"`` becomes
    ``"i"`` followed by a combining dot). Only the leading code point is kept.
    """
    lowered = ch.lower()
    if len(lowered) != 1:
        return lowered[:1] or ch
    return lowered


def format_input(text: str) -> str:
    """Return the matching view of ``text``.

    Every whitespace character and the ASCII hyphen become a single space so
    that they match each other; every other character is case-folded. The
    result has exactly ``len(text)`` characters.

    Case folding uses ``str.lower``, which applies the Unicode default
    mapping and ignores the process locale. Locale-specific rules such as
    the Turkish dotted and dotless I are not applied: ``"I"`` always folds
    to ``"i"``.
    """
    return "".join(
        _SPACE if ch.isspace() or ch == _HYPHEN else fold_char(ch)
        for ch in text
    )


def is_gap(ch: str) -> bool:
    return ch in GAP_CHARACTERS


def is_space(ch: str) -> bool:
    return ch.isspace()


def count_gaps(text: str) -> int:
    """Count gap characters in ``text``."""
    return sum(1 for ch in text if ch in GAP_CHARACTERS)


def count_spaces(text: str) -> int:
    """Count whitespace characters in ``text``."""
    return sum(1 for ch in text if ch.isspace())


__all__ = [
    "GAP_CHARACTERS",
    "fold_char",
    "format_input",
    "is_gap",
    "is_space",
    "count_gaps",
    "count_spaces",
]
