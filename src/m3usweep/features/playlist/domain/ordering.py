"""Where: src/m3usweep/features/playlist/domain/ordering.py
What: Deterministic total order over track records.
Why: Playlist output must be byte-identical across runs on an unchanged tree,
whatever order the filesystem enumerates files in.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import total_ordering
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .track_record import TrackRecord

__all__ = ["Ranked", "path_key", "sort_tracks", "track_sort_key"]


@total_ordering
@dataclass(frozen=True, slots=True)
class Ranked:
    """Optional sort key where an absent value ranks before any present one.

    Two absent values are equal; two present values compare by ``value``.
    """

    present: bool
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "Ranked":
        """Wrap ``value``, treating ``None`` as absent."""

        if value is None:
            return cls(present=False)
        return cls(present=True, value=value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ranked):
            return NotImplemented
        if self.present != other.present:
            return not self.present
        if not self.present:
            return False
        return self.value < other.value


def path_key(path: PurePath) -> tuple[bytes, ...]:
    """Component-wise byte key for a path; total even for undecodable names."""

    return tuple(os.fsencode(part) for part in path.parts)


def track_sort_key(record: TrackRecord) -> tuple[Ranked, Ranked, Ranked, Ranked, Ranked, tuple[bytes, ...]]:
    """Return artist, album, track number, title, duration, then path."""

    return (
        Ranked.of(record.artist),
        Ranked.of(record.album),
        Ranked.of(record.track_number),
        Ranked.of(record.title),
        Ranked.of(record.duration_seconds),
        path_key(record.path),
    )


def sort_tracks(records: list[TrackRecord]) -> list[TrackRecord]:
    """Sort ``records`` in place by ``track_sort_key`` and return the list."""

    records.sort(key=track_sort_key)
    return records
