"""
Summary: Playlist use cases: metadata aggregation and M3U writing.
Why: Provide a stable import path for the sweep service and tests.
"""

from .aggregator import build_track_records, display_path, media_session, read_track_record
from .ports import MediaInfoPort
from .writer import playlist_filename, render_playlist, render_record, write_playlist

__all__ = [
    "MediaInfoPort",
    "build_track_records",
    "display_path",
    "media_session",
    "playlist_filename",
    "read_track_record",
    "render_playlist",
    "render_record",
    "write_playlist",
]
