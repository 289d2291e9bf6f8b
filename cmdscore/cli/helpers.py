from __future__ import annotations
import logging
import click

from ..config import load_typed_config
from ..match.memo import MemoPool
from ..match.scoring import CommandScorer
from ..utils.output import error
from ..version import __version__

logger = logging.getLogger(__name__)


def build_scorer(cfg: dict) -> CommandScorer:
    """Build a scorer from the effective configuration dict.

    Args:
        cfg: Full configuration dict (as stored on the click context)

    Returns:
        CommandScorer bound to the configured weights and, when enabled,
        a memo pool sized from the pool section
    """
    from ..config_types import AppConfig
    app_cfg = AppConfig.from_dict(cfg)
    pool = MemoPool(max_idle=app_cfg.pool.max_idle) if app_cfg.pool.enabled else None
    return CommandScorer(config=app_cfg.scoring, pool=pool)


@click.group()
@click.version_option(version=__version__, prog_name="command-score")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the configured log level')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Fuzzy relevance scoring for command-palette style matching.

    \b
    Examples:
      cmdscore score "Go to File" gtf
      cmdscore score "Auto-Advance" "auto adv" --json
      cmdscore config --section scoring

    \b
    Weights can be tuned through the environment, e.g.:
      CMDSCORE__SCORING__PENALTY_SKIPPED=0.995
    """
    if isinstance(ctx.obj, dict):
        return
    overrides = {'log_level': log_level.upper()} if log_level else None
    try:
        ctx.obj = load_typed_config(overrides).to_dict()
    except (ValueError, TypeError) as e:
        click.echo(error(f"Invalid configuration: {e}"), err=True)
        ctx.exit(1)

__all__ = ["cli", "build_scorer"]
