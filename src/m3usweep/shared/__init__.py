"""Shared types used across features."""

from .errors import (
    DirectoryReadError,
    EmptyResultError,
    EntryMetadataError,
    PathEncodingError,
    PathResolutionError,
    PlaylistWriteError,
    SweepError,
)
from .events import SweepEvent

__all__ = [
    "DirectoryReadError",
    "EmptyResultError",
    "EntryMetadataError",
    "PathEncodingError",
    "PathResolutionError",
    "PlaylistWriteError",
    "SweepError",
    "SweepEvent",
]
