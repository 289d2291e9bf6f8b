"""Top-level package for command-score (cmdscore).

Version identifier is defined in :mod:`cmdscore.version` to keep a single
source of truth that can be imported without pulling heavier submodules.
The scoring primitive is re-exported for convenience.
"""

from .version import __version__  # re-export
from .match.scoring import command_score, CommandScorer, ScoringConfig

__all__ = ["__version__", "command_score", "CommandScorer", "ScoringConfig"]
