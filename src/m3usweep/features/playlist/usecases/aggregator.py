"""Metadata aggregation for discovered audio files.

Where: src/m3usweep/features/playlist/usecases/aggregator.py
What: Query the metadata collaborator once per file and build TrackRecords.
Why: Isolate per-file session handling so one bad file never stops a sweep.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeVar

from m3usweep.platform.logging import log_event
from m3usweep.platform.mediainfo import MutagenMediaInfo
from m3usweep.shared.errors import PathEncodingError
from m3usweep.shared.events import SweepEvent

from ..domain.track_record import TrackRecord
from .ports import MediaInfoPort

T = TypeVar("T")

__all__ = ["build_track_records", "display_path", "media_session", "read_track_record"]


@contextmanager
def media_session(media_info: MediaInfoPort, path: str) -> Iterator[bool]:
    """Open ``path`` on ``media_info`` and always close it on exit.

    Yields:
        bool: Whether the collaborator managed to open the file.
    """
    try:
        yield media_info.open(path)
    finally:
        media_info.close()


def display_path(audio_file: Path, scan_root: Path) -> Path:
    """Express ``audio_file`` relative to ``scan_root``, else absolutely."""

    try:
        return audio_file.relative_to(scan_root)
    except ValueError:
        return audio_file.absolute()


def _text_or_none(value: str) -> str | None:
    return value if value else None


def _query(getter: Callable[[], T], absent: T, failures: list[str]) -> T:
    """Call one collaborator getter; a failure only blanks that field."""

    try:
        return getter()
    except Exception as exc:
        failures.append(str(exc) if str(exc) else type(exc).__name__)
        return absent


def read_track_record(
    media_info: MediaInfoPort, audio_file: Path, scan_root: Path
) -> TrackRecord:
    """Build one record; only the path is set when the file cannot be opened.

    Each field is queried separately, so a getter that raises leaves only its
    own field absent. Such failures are logged once per file.

    Raises:
        PathEncodingError: The absolute path is not valid UTF-8 text.
    """
    record_path = display_path(audio_file, scan_root)
    source = os.fspath(audio_file.absolute())
    try:
        _ = source.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathEncodingError(audio_file, exc) from exc

    with media_session(media_info, source) as opened:
        if not opened:
            log_event(
                logging.DEBUG,
                SweepEvent.FILE_SKIP,
                "No readable metadata in %s",
                source,
                source_path=audio_file,
                directory=scan_root,
                error_message="unreadable metadata",
            )
            return TrackRecord(path=record_path)

        failures: list[str] = []
        title = _query(media_info.get_title, "", failures)
        artist = _query(media_info.get_performer, "", failures)
        album = _query(media_info.get_album, "", failures)
        track_number = _query(media_info.get_track_number, None, failures)
        duration_ms = _query(media_info.get_duration_ms, None, failures)

    if failures:
        error_message = "; ".join(dict.fromkeys(failures))
        log_event(
            logging.WARNING,
            SweepEvent.FILE_SKIP,
            "Metadata query failed for %s: %s",
            audio_file,
            error_message,
            source_path=audio_file,
            directory=scan_root,
            error_message=error_message,
        )

    return TrackRecord(
        path=record_path,
        title=_text_or_none(title),
        artist=_text_or_none(artist),
        album=_text_or_none(album),
        track_number=track_number,
        duration_seconds=duration_ms // 1000 if duration_ms is not None else None,
    )


def build_track_records(
    audio_files: Iterable[Path],
    scan_root: Path,
    media_info: MediaInfoPort | None = None,
) -> list[TrackRecord]:
    """Read metadata for every file and return one record per readable path.

    Args:
        audio_files: Candidate files, usually from ``collect_audio_files``.
        scan_root: Canonical root the display paths are relative to.
        media_info: Metadata collaborator; defaults to ``MutagenMediaInfo``.

    Returns:
        list[TrackRecord]: Records in the order the files were given.
    """
    collaborator: MediaInfoPort = media_info if media_info is not None else MutagenMediaInfo()
    files = list(audio_files)
    total_files = len(files)
    records: list[TrackRecord] = []

    for sequence, audio_file in enumerate(files, start=1):
        try:
            record = read_track_record(collaborator, audio_file, scan_root)
        except PathEncodingError as exc:
            log_event(
                logging.WARNING,
                SweepEvent.FILE_SKIP,
                "%s",
                exc,
                source_path=audio_file,
                directory=scan_root,
                error_message="path is not valid text",
            )
            continue
        except Exception as exc:
            error_message = str(exc) if str(exc) else type(exc).__name__
            log_event(
                logging.WARNING,
                SweepEvent.FILE_SKIP,
                "Metadata query failed for %s: %s",
                audio_file,
                error_message,
                source_path=audio_file,
                directory=scan_root,
                error_message=error_message,
            )
            record = TrackRecord(path=display_path(audio_file, scan_root))

        log_event(
            logging.DEBUG,
            SweepEvent.FILE_READ,
            "Track record #%d/%d:\n%s",
            sequence,
            total_files,
            record.describe(),
            sequence=sequence,
            total_files=total_files,
            source_path=audio_file,
            directory=scan_root,
            artist=record.artist,
            title=record.title,
        )
        records.append(record)

    return records
