"""Shared path utilities for runtime locations.

This module centralizes how the application discovers the optional log
file. There is no configuration file: every location is either passed
explicitly or read from the environment.

Policy:
- Log file: disabled unless ``M3USWEEP_LOG_FILE`` names a path.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_LOG_FILE: Final[str] = "M3USWEEP_LOG_FILE"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    if default_path is None:
        return None
    return default_path.expanduser().resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file path, or ``None`` when file logging is disabled."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_LOG_FILE,
        default_factory=lambda: None,
    )


__all__ = [
    "ENV_LOG_FILE",
    "default_log_file",
    "resolve_overridable_path",
]
