"""Where: src/m3usweep/shared/errors.py
What: Error kinds raised or reported while sweeping a directory.
Why: Give every diagnostic a type so callers can tell branch-scoped failures
from root-scoped ones.
"""

from __future__ import annotations

from pathlib import Path


class SweepError(Exception):
    """Base class for failures tied to a filesystem location."""

    reason: str = "Sweep failed"

    def __init__(self, path: Path | str, cause: BaseException | None = None) -> None:
        self.path: Path | str = path
        self.cause: BaseException | None = cause
        message = f"{self.reason}: {path}"
        if cause is not None:
            detail = str(cause) if str(cause) else type(cause).__name__
            message = f"{message} ({detail})"
        super().__init__(message)


class PathResolutionError(SweepError):
    """Argument cannot be canonicalized or is not a directory."""

    reason = "Invalid directory"


class DirectoryReadError(SweepError):
    """A directory could not be listed."""

    reason = "Failed to read directory"


class EntryMetadataError(SweepError):
    """The type of a directory entry could not be determined."""

    reason = "Failed to get metadata for entry"


class PathEncodingError(SweepError):
    """A path cannot be represented as UTF-8 text."""

    reason = "Path is not valid text"


class EmptyResultError(SweepError):
    """No audio files were found beneath a root."""

    reason = "No audio files found at"


class PlaylistWriteError(SweepError):
    """The playlist file could not be created or written."""

    reason = "Failed to write playlist"


__all__ = [
    "SweepError",
    "PathResolutionError",
    "DirectoryReadError",
    "EntryMetadataError",
    "PathEncodingError",
    "EmptyResultError",
    "PlaylistWriteError",
]
