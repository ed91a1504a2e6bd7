"""Application service orchestrating playlist sweeps.

Where: src/m3usweep/application/services/sweep_service.py
What: Resolve each root, walk it, read metadata, sort and write a playlist.
Why: Give the CLI one entry point that reports failures without aborting.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from m3usweep.config.settings import RECURSE_DEFAULT
from m3usweep.features.playlist import (
    MediaInfoPort,
    build_track_records,
    sort_tracks,
    write_playlist,
)
from m3usweep.features.scan import collect_audio_files
from m3usweep.platform.logging import log_event
from m3usweep.shared.errors import (
    EmptyResultError,
    PathResolutionError,
    PlaylistWriteError,
    SweepError,
)
from m3usweep.shared.events import SweepEvent

DEFAULT_ARGUMENT: Final[str] = "."

_FAILURE_EVENTS: Final[dict[type[SweepError], tuple[int, SweepEvent]]] = {
    PathResolutionError: (logging.ERROR, SweepEvent.DIRECTORY_ERROR),
    EmptyResultError: (logging.WARNING, SweepEvent.DIRECTORY_NO_FILES),
    PlaylistWriteError: (logging.ERROR, SweepEvent.PLAYLIST_ERROR),
}


@dataclass
class SweepResult:
    """Outcome of sweeping one root directory argument."""

    argument: str
    root: Path | None = None
    playlist_path: Path | None = None
    track_count: int = 0
    error: SweepError | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.playlist_path is not None


def resolve_root(argument: str | os.PathLike[str]) -> Path:
    """Canonicalize ``argument`` into an absolute directory path.

    Raises:
        PathResolutionError: The path does not exist, cannot be resolved, or
            is not a directory.
    """
    try:
        root = Path(argument).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise PathResolutionError(os.fspath(argument), exc) from exc
    if not root.is_dir():
        raise PathResolutionError(root, NotADirectoryError("not a directory"))
    return root


def sweep_directory(
    argument: str | os.PathLike[str],
    *,
    media_info: MediaInfoPort | None = None,
    recurse: bool = RECURSE_DEFAULT,
) -> SweepResult:
    """Run walk, aggregate, sort and write for a single root argument.

    Failures are logged and recorded on the returned result; nothing is
    raised for per-root problems.
    """
    result = SweepResult(argument=os.fspath(argument))
    try:
        root = resolve_root(argument)
        result.root = root
        log_event(
            logging.INFO,
            SweepEvent.DIRECTORY_START,
            "Sweeping %s",
            root,
            directory=root,
        )

        audio_files = list(collect_audio_files(root, recurse=recurse))
        if not audio_files:
            raise EmptyResultError(root)

        records = sort_tracks(build_track_records(audio_files, root, media_info))
        result.track_count = len(records)
        result.playlist_path = write_playlist(records, root)
    except SweepError as exc:
        result.error = exc
        level, event = _FAILURE_EVENTS.get(
            type(exc), (logging.ERROR, SweepEvent.DIRECTORY_ERROR)
        )
        log_event(
            level,
            event,
            "%s",
            exc,
            directory=result.root or result.argument,
            error_message=str(exc.cause) if exc.cause is not None else None,
        )
        return result

    log_event(
        logging.INFO,
        SweepEvent.PLAYLIST_WRITTEN,
        "Wrote %s (%d tracks)",
        result.playlist_path,
        result.track_count,
        directory=result.root,
        playlist_path=result.playlist_path,
        track_count=result.track_count,
    )
    return result


def sweep_all(
    arguments: Sequence[str],
    *,
    media_info: MediaInfoPort | None = None,
    recurse: bool = RECURSE_DEFAULT,
) -> list[SweepResult]:
    """Sweep every argument in turn, or the current directory if none given."""

    targets = list(arguments) or [DEFAULT_ARGUMENT]
    return [
        sweep_directory(argument, media_info=media_info, recurse=recurse)
        for argument in targets
    ]


__all__ = ["DEFAULT_ARGUMENT", "SweepResult", "resolve_root", "sweep_all", "sweep_directory"]
