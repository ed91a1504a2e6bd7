"""Mutagen-backed metadata collaborator.

Where: src/m3usweep/platform/mediainfo/session.py
What: A per-file query session exposing performer, title, album, track
number and duration for one audio file at a time.
Why: Keep the aggregator independent of how tags are stored per container.
"""

from __future__ import annotations

from typing import Any, ClassVar, Final

import mutagen
from mutagen import MutagenError
from mutagen.asf import ASF
from mutagen.id3 import ID3

from m3usweep.platform.logging import logger

from ._tag_utils import first_text, parse_slash_separated

__all__ = ["MutagenMediaInfo"]

_EASY_KEYS: Final[dict[str, str]] = {
    "performer": "artist",
    "title": "title",
    "album": "album",
    "track": "tracknumber",
}
_ID3_KEYS: Final[dict[str, str]] = {
    "performer": "TPE1",
    "title": "TIT2",
    "album": "TALB",
    "track": "TRCK",
}
_ASF_KEYS: Final[dict[str, str]] = {
    "performer": "Author",
    "title": "Title",
    "album": "WM/AlbumTitle",
    "track": "WM/TrackNumber",
}


class MutagenMediaInfo:
    """Query audio metadata through ``mutagen.File``.

    One instance may be reused for many files, but only one file is open at
    a time: ``open`` releases any previous file first. Every getter returns
    the collaborator's "absent" value (``""`` or ``None``) while no file is
    open.
    """

    OPEN_OPTIONS: ClassVar[dict[str, Any]] = {"easy": True}

    def __init__(self) -> None:
        self._audio: Any | None = None
        self._keys: dict[str, str] = _EASY_KEYS

    def open(self, path: str) -> bool:
        """Open ``path``; return False when mutagen cannot read it."""

        self.close()
        try:
            audio = mutagen.File(path, **self.OPEN_OPTIONS)
        except (MutagenError, OSError) as exc:
            logger.debug("Mutagen could not open %s: %s", path, exc)
            return False
        if audio is None:
            logger.debug("Unrecognised audio container: %s", path)
            return False

        self._audio = audio
        self._keys = self._select_keys(audio)
        return True

    @staticmethod
    def _select_keys(audio: Any) -> dict[str, str]:
        if isinstance(audio, ASF):
            return _ASF_KEYS
        if isinstance(getattr(audio, "tags", None), ID3):
            return _ID3_KEYS
        return _EASY_KEYS

    def _tag_text(self, field: str) -> str:
        if self._audio is None:
            return ""
        tags = getattr(self._audio, "tags", None)
        if tags is None:
            return ""
        try:
            value = tags.get(self._keys[field])
        except (KeyError, ValueError) as exc:
            logger.debug("Unreadable %s tag: %s", field, exc)
            return ""
        return first_text(value).strip()

    def get_performer(self) -> str:
        return self._tag_text("performer")

    def get_title(self) -> str:
        return self._tag_text("title")

    def get_album(self) -> str:
        return self._tag_text("album")

    def get_track_number(self) -> int | None:
        number, _total = parse_slash_separated(self._tag_text("track"))
        return number

    def get_duration_ms(self) -> int | None:
        """Return the stream length in whole milliseconds, if known."""

        if self._audio is None:
            return None
        info = getattr(self._audio, "info", None)
        length = getattr(info, "length", None)
        if not isinstance(length, (int, float)) or length < 0:
            return None
        return int(length * 1000)

    def close(self) -> None:
        self._audio = None
        self._keys = _EASY_KEYS
