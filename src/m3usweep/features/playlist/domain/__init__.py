"""Playlist domain types and ordering."""

from .ordering import Ranked, path_key, sort_tracks, track_sort_key
from .track_record import TrackRecord

__all__ = ["Ranked", "TrackRecord", "path_key", "sort_tracks", "track_sort_key"]
