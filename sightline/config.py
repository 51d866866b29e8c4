"""
Sightline configuration.

Numeric constants shared by the vector and camera code, plus the runtime
settings used by the demo entry point. Runtime settings can be overridden
via environment variables.
"""

import logging
import math
import os
import sys
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Numeric constants
# =============================================================================

PI = math.pi

# Per-axis tolerance used by vector equality
VECTOR_TOLERANCE = 0.0001

DEFAULT_POSITION = (0.0, 0.0)
DEFAULT_ORIENTATION = (0.0, 1.0)  # Facing "up"
DEFAULT_FIELD_OF_VIEW = PI  # 180 degrees
DEFAULT_VIEW_DISTANCE = sys.float_info.max  # Effectively unlimited

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# Runtime settings
# =============================================================================

@dataclass
class SightlineConfig:
    """Runtime settings for the demo program."""

    log_level: str = field(
        default_factory=lambda: os.getenv("SIGHTLINE_LOG_LEVEL", "WARNING").upper()
    )

    @classmethod
    def from_env(cls) -> "SightlineConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.log_level not in _LOG_LEVELS:
            errors.append(
                f"SIGHTLINE_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )
        return errors


# Singleton config instance
_config: Optional[SightlineConfig] = None


def get_config() -> SightlineConfig:
    """Get the global sightline configuration."""
    global _config
    if _config is None:
        _config = SightlineConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next call re-reads the environment."""
    global _config
    _config = None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a root handler for console output.

    The library itself never calls this; only entry points do.
    Unknown levels fall back to WARNING.
    """
    config = get_config()
    name = (level or config.log_level).upper()
    if name not in _LOG_LEVELS:
        name = "WARNING"
    logging.basicConfig(level=getattr(logging, name), format=LOG_FORMAT)
