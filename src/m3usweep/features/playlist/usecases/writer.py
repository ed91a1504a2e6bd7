"""
Summary: Serialize ordered track records into an extended-M3U playlist.
Why: Keep the file format and the atomic write in one place.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Iterable
from contextlib import suppress
from pathlib import Path

from m3usweep.config.settings import (
    EXTINF_PREFIX,
    FALLBACK_PLAYLIST_NAME,
    PLAYLIST_ENCODING,
    PLAYLIST_HEADER,
    PLAYLIST_SUFFIX,
)
from m3usweep.platform.logging import log_event
from m3usweep.shared.errors import PlaylistWriteError
from m3usweep.shared.events import SweepEvent

from ..domain.track_record import TrackRecord

_NEW_FILE_MODE = 0o666


def _is_text(value: str) -> bool:
    try:
        _ = value.encode(PLAYLIST_ENCODING)
    except UnicodeEncodeError:
        return False
    return True


def playlist_filename(scan_root: Path) -> str:
    """``<base name>.m3u``, or ``playlist.m3u`` when no usable base name exists."""

    name = scan_root.name
    if not name or not _is_text(name):
        return FALLBACK_PLAYLIST_NAME
    return f"{name}{PLAYLIST_SUFFIX}"


def render_record(record: TrackRecord) -> list[str] | None:
    """Return the record's playlist lines, or None if they are not valid text.

    The ``#EXTINF`` line is only emitted when duration, artist and title are
    all known.
    """
    lines: list[str] = []
    if record.has_extinf:
        lines.append(
            f"{EXTINF_PREFIX}{record.duration_seconds},{record.artist} - {record.title}"
        )
    lines.append(os.fspath(record.path))
    if not all(_is_text(line) for line in lines):
        return None
    return lines


def render_playlist(records: Iterable[TrackRecord]) -> str:
    """Render the full playlist text, one newline after every line."""

    lines = [PLAYLIST_HEADER]
    for record in records:
        rendered = render_record(record)
        if rendered is None:
            log_event(
                logging.WARNING,
                SweepEvent.FILE_SKIP,
                "Path cannot be written as text: %r",
                os.fspath(record.path),
                error_message="path is not valid text",
            )
            continue
        lines.extend(rendered)
    return "".join(f"{line}\n" for line in lines)


def _new_file_mode() -> int:
    """Mode a freshly created file gets under the current umask."""

    umask = os.umask(0)
    _ = os.umask(umask)
    return _NEW_FILE_MODE & ~umask


def _target_mode(target: Path) -> int:
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        return _new_file_mode()


def _write_destination(target: Path) -> Path:
    """Follow an existing symlinked playlist so the link itself is kept."""

    if target.is_symlink():
        return target.resolve()
    return target


def write_playlist(records: Iterable[TrackRecord], scan_root: Path) -> Path:
    """Write ``records`` in order to a playlist file inside ``scan_root``.

    The content goes to a temporary sibling first and is moved over the
    target with ``os.replace``, so an existing playlist is either replaced
    completely or left untouched. When the playlist is a symlink, the file
    it points to is replaced instead. New files get ``0o666`` less the
    process umask; existing ones keep their mode.

    Args:
        records: Track records, already sorted.
        scan_root: Directory that receives the playlist.

    Returns:
        Path: Location of the written playlist.

    Raises:
        PlaylistWriteError: The playlist could not be created or written.
    """
    target = scan_root / playlist_filename(scan_root)
    content = render_playlist(records)

    temp_path: Path | None = None
    try:
        destination = _write_destination(target)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=PLAYLIST_ENCODING,
            newline="\n",
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            _ = handle.write(content)
        os.chmod(temp_path, _target_mode(destination))
        os.replace(temp_path, destination)
    except (OSError, RuntimeError) as exc:
        if temp_path is not None:
            with suppress(OSError):
                temp_path.unlink(missing_ok=True)
        raise PlaylistWriteError(target, exc) from exc

    return target


__all__ = [
    "playlist_filename",
    "render_playlist",
    "render_record",
    "write_playlist",
]
