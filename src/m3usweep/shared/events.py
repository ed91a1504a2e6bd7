"""
Summary: Structured event identifiers attached to sweep diagnostics.
Why: Let the console handler style each diagnostic without parsing messages.
"""

from __future__ import annotations

from enum import StrEnum


class SweepEvent(StrEnum):
    """Structured event identifiers for sweep logs."""

    DIRECTORY_START = "sweep.directory.start"
    DIRECTORY_NO_FILES = "sweep.directory.no_files"
    DIRECTORY_ERROR = "sweep.directory.error"
    WALK_ERROR = "sweep.walk.error"
    FILE_READ = "sweep.file.read"
    FILE_SKIP = "sweep.file.skip"
    PLAYLIST_WRITTEN = "sweep.playlist.written"
    PLAYLIST_ERROR = "sweep.playlist.error"


__all__ = ["SweepEvent"]
