"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from cmdscore.cli.helpers import cli  # root group
from cmdscore.cli import score_cmds  # noqa: F401
from cmdscore.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
