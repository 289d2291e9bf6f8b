"""Output formatting utilities for consistent CLI reporting."""

import click


def score_color(score: float) -> str:
    """Pick a display color for a score.

    Args:
        score: Score in [0, 1]

    Returns:
        click color name: green for strong matches, yellow for weak ones,
        red for no match
    """
    if score <= 0.0:
        return 'red'
    if score >= 0.8:
        return 'green'
    return 'yellow'


def format_score(score: float, precision: int = 4) -> str:
    """Format a score with color.

    Args:
        score: Score in [0, 1]
        precision: Digits after the decimal point

    Returns:
        Formatted score string
    """
    return click.style(f"{score:.{precision}f}", fg=score_color(score), bold=True)


def error(text: str, prefix: str = "✗") -> str:
    """Format an error message."""
    return f"{click.style(prefix, fg='red')} {text}"


__all__ = [
    "score_color",
    "format_score",
    "error",
]
