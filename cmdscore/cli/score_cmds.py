"""Single-pair scoring command."""

from __future__ import annotations
import click
import json as _json

from .helpers import cli, build_scorer
from ..utils.output import format_score


@cli.command(name="score")
@click.argument("item")
@click.argument("pattern")
@click.option("--precision", "-p", type=click.IntRange(0, 17), default=4, show_default=True,
              help="Digits after the decimal point.")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON object instead of plain text.")
@click.pass_context
def score(ctx: click.Context, item: str, pattern: str, precision: int, as_json: bool):
    """Score how well PATTERN abbreviates ITEM.

    Prints a number between 0 (no match) and 1 (exact match).
    """
    value = build_scorer(ctx.obj).score(item, pattern)
    if as_json:
        click.echo(_json.dumps({"item": item, "pattern": pattern, "score": round(value, precision)}))
        return
    click.echo(format_score(value, precision))


__all__ = ["score"]
