"""
Summary: Port for the metadata-extraction collaborator.
Why: Decouple the aggregator from mutagen so tests and swaps stay simple.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MediaInfoPort(Protocol):
    """Synchronous per-file metadata query session.

    Text getters return ``""`` when a field is absent; numeric getters
    return ``None``.
    """

    def open(self, path: str) -> bool:
        """Open ``path`` for querying; False when it cannot be read."""
        ...

    def get_performer(self) -> str:
        ...

    def get_title(self) -> str:
        ...

    def get_album(self) -> str:
        ...

    def get_track_number(self) -> int | None:
        ...

    def get_duration_ms(self) -> int | None:
        ...

    def close(self) -> None:
        """Release the file opened by the last ``open`` call."""
        ...


__all__ = ["MediaInfoPort"]
