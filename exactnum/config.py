"""Computation configuration for exactnum."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

import structlog

from exactnum.constants import (
    DEFAULT_LN_ITERATIONS,
    DEFAULT_SCALE,
    ENV_LN_ITERATIONS,
    ENV_SCALE,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class NumberConfig:
    """Configuration bound to every Number.

    The scale is handed to each primitive call explicitly, so two Numbers
    built with different configs never interfere with each other and no
    process-wide decimal state is touched.

    Attributes:
        scale: Fractional digits kept by every intermediate result (default: 20)
        ln_iterations: Number of atanh series terms used by ln() (default: 100)
    """

    scale: int = DEFAULT_SCALE
    ln_iterations: int = DEFAULT_LN_ITERATIONS

    def __post_init__(self) -> None:
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise ValueError(f"scale must be an int, got {type(self.scale).__name__}")
        if self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")
        if isinstance(self.ln_iterations, bool) or not isinstance(self.ln_iterations, int):
            raise ValueError(
                f"ln_iterations must be an int, got {type(self.ln_iterations).__name__}"
            )
        if self.ln_iterations < 1:
            raise ValueError(f"ln_iterations must be at least 1, got {self.ln_iterations}")

    def replace(self, **changes: int) -> NumberConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls) -> NumberConfig:
        """Build a config from environment variables.

        - EXACTNUM_SCALE: internal scale (default: 20)
        - EXACTNUM_LN_ITERATIONS: ln() series terms (default: 100)

        Raises:
            ValueError: If a variable is set but is not a valid integer
        """
        scale = _int_from_env(ENV_SCALE, DEFAULT_SCALE)
        ln_iterations = _int_from_env(ENV_LN_ITERATIONS, DEFAULT_LN_ITERATIONS)
        config = cls(scale=scale, ln_iterations=ln_iterations)
        logger.debug("config_loaded_from_env", scale=scale, ln_iterations=ln_iterations)
        return config


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from err


# Default configuration instance
DEFAULT_NUMBER_CONFIG = NumberConfig()
