"""Configuration management for m3usweep."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from m3usweep.config.paths import default_log_file

ENV_LOG_LEVEL: Final[str] = "M3USWEEP_LOG_LEVEL"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True, slots=True)
class Config:
    """Application configuration read from the environment."""

    # Optional rotating log file
    log_file: Path | None = None

    # Console diagnostics threshold
    console_level: int = logging.INFO

    @classmethod
    def load(cls, env: Mapping[str, str] | None = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ`` (for testing).

        Returns:
            Config: Loaded configuration object.
        """
        mapping = env if env is not None else os.environ
        return cls(
            log_file=default_log_file(mapping),
            console_level=parse_level(mapping.get(ENV_LOG_LEVEL)),
        )


def parse_level(raw: str | None, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into a logging level."""

    if not raw:
        return default
    return _LEVEL_NAMES.get(raw.strip().upper(), default)


__all__ = ["Config", "ENV_LOG_LEVEL", "parse_level"]
