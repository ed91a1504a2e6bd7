"""Application services."""

from .sweep_service import (
    DEFAULT_ARGUMENT,
    SweepResult,
    resolve_root,
    sweep_all,
    sweep_directory,
)

__all__ = ["DEFAULT_ARGUMENT", "SweepResult", "resolve_root", "sweep_all", "sweep_directory"]
