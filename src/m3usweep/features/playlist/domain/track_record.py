# Where: m3usweep.features.playlist.domain.track_record
# What: Immutable record of one discovered audio file and its known metadata.
# Why: Single representation shared by the aggregator, ordering and writer.

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from pathlib import Path

from .ordering import track_sort_key


@total_ordering
@dataclass(frozen=True, slots=True)
class TrackRecord:
    """One audio file and whatever metadata could be read from it.

    ``None`` means unknown; the empty string is never stored. Records compare
    equal only when all six fields match, and order by ``track_sort_key``.
    """

    path: Path
    title: str | None = None
    artist: str | None = None
    album: str | None = None
    track_number: int | None = None
    duration_seconds: int | None = None

    def __post_init__(self) -> None:
        for name in ("track_number", "duration_seconds"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def sort_key(self) -> tuple[object, ...]:
        """Key used for ordering; see ``track_sort_key``."""

        return track_sort_key(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TrackRecord):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @property
    def has_extinf(self) -> bool:
        """True when duration, artist and title are all known."""

        return (
            self.duration_seconds is not None
            and self.artist is not None
            and self.title is not None
        )

    def describe(self) -> str:
        """Multi-line human-readable summary used in debug logs."""

        lines = [str(self.path)]
        if self.title is not None:
            title_line = f"\tTitle: {self.title}"
            if self.track_number is not None:
                title_line += f" : #{self.track_number}"
            lines.append(title_line)
        if self.artist is not None:
            lines.append(f"\tArtist: {self.artist}")
        if self.album is not None:
            lines.append(f"\tAlbum: {self.album}")
        if self.duration_seconds is not None:
            lines.append(f"\tDuration: {self.duration_seconds}s")
        return "\n".join(lines)


__all__ = ["TrackRecord"]
