"""Typed configuration dataclasses for command-score.

Provides strongly-typed configuration objects mirroring the nested dict
produced by :func:`cmdscore.config.load_config`.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any

from .match.scoring import ScoringConfig


@dataclass
class PoolConfig:
    """Memo pool sizing used by the CLI and long-lived scorers."""
    enabled: bool = True
    max_idle: int = 16

    def __post_init__(self) -> None:
        if isinstance(self.max_idle, bool) or not isinstance(self.max_idle, int):
            raise ValueError(f"pool.max_idle must be an integer, got {self.max_idle!r}")
        if self.max_idle < 0:
            raise ValueError(f"pool.max_idle must be >= 0, got {self.max_idle}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for config display."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    pool: PoolConfig = field(default_factory=PoolConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "scoring": self.scoring.to_dict(),
            "pool": self.pool.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance

        Raises:
            ValueError: If a scoring weight is out of range
            TypeError: If a section contains unknown keys
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            scoring=ScoringConfig(**data.get("scoring", {})),
            pool=PoolConfig(**data.get("pool", {})),
        )


__all__ = ["PoolConfig", "AppConfig"]
