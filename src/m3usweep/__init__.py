"""m3usweep: write extended-M3U playlists for directories of audio files."""

__version__ = "0.1.0"
