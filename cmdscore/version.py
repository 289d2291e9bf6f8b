"""Central version declaration for command-score.

Update this file when cutting a new release tag. Keep semantic versioning.
The CLI --version option imports from here.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
