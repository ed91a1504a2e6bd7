"""Where: src/m3usweep/config/settings.py
What: Immutable runtime constants for scanning and playlist output.
Why: Expose the audio allow-list and playlist format tokens without I/O.
"""

from __future__ import annotations

from typing import Final

# Scanning --------------------------------------------------------------------

# Recognized audio extensions, matched exactly and case-sensitively against
# the suffix without its leading dot.
AUDIO_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"mp3", "ogg", "flac", "wav", "m4a", "wma"}
)

# Sweeps descend into subdirectories unless told otherwise.
RECURSE_DEFAULT: Final[bool] = True


# Playlist output -------------------------------------------------------------

PLAYLIST_HEADER: Final[str] = "#EXTM3U"
EXTINF_PREFIX: Final[str] = "#EXTINF:"
PLAYLIST_SUFFIX: Final[str] = ".m3u"
FALLBACK_PLAYLIST_NAME: Final[str] = "playlist.m3u"
PLAYLIST_ENCODING: Final[str] = "utf-8"


__all__ = [
    "AUDIO_EXTENSIONS",
    "RECURSE_DEFAULT",
    "PLAYLIST_HEADER",
    "EXTINF_PREFIX",
    "PLAYLIST_SUFFIX",
    "FALLBACK_PLAYLIST_NAME",
    "PLAYLIST_ENCODING",
]
