"""Playlist feature: records, ordering, aggregation and writing."""

from .domain import Ranked, TrackRecord, sort_tracks, track_sort_key
from .usecases import MediaInfoPort, build_track_records, write_playlist

__all__ = [
    "MediaInfoPort",
    "Ranked",
    "TrackRecord",
    "build_track_records",
    "sort_tracks",
    "track_sort_key",
    "write_playlist",
]
