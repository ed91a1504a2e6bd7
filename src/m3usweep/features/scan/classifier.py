"""
Summary: Decide whether a filesystem path names a candidate audio file.
Why: Keep the extension allow-list check pure so the walker stays simple.
"""

from __future__ import annotations

from pathlib import PurePath

from m3usweep.config.settings import AUDIO_EXTENSIONS


def file_extension(path: PurePath) -> str | None:
    """Return the suffix without its dot, or None if missing or not valid text."""

    suffix = path.suffix
    if not suffix:
        return None
    extension = suffix[1:]
    try:
        _ = extension.encode("utf-8")
    except UnicodeEncodeError:
        # Undecodable bytes surface as lone surrogates.
        return None
    return extension


def is_audio_candidate(path: PurePath) -> bool:
    """Return True when the exact, case-sensitive extension is allow-listed."""

    extension = file_extension(path)
    return extension is not None and extension in AUDIO_EXTENSIONS


__all__ = ["file_extension", "is_audio_candidate"]
