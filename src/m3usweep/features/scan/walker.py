"""Where: src/m3usweep/features/scan/walker.py
What: Depth-first enumeration of candidate audio files beneath a root.
Why: Feed the aggregator lazily without recursion so deep trees are safe.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from m3usweep.config.settings import RECURSE_DEFAULT
from m3usweep.platform.logging import log_event
from m3usweep.shared.errors import DirectoryReadError, EntryMetadataError, SweepError
from m3usweep.shared.events import SweepEvent

from .classifier import is_audio_candidate

WalkErrorCallback = Callable[[SweepError], None]


def report_walk_error(error: SweepError) -> None:
    """Default walk error callback: log the failure and carry on."""

    log_event(
        logging.WARNING,
        SweepEvent.WALK_ERROR,
        "%s",
        error,
        source_path=error.path,
        error_message=str(error.cause) if error.cause is not None else str(error),
    )


def collect_audio_files(
    root: Path,
    recurse: bool = RECURSE_DEFAULT,
    on_error: WalkErrorCallback | None = None,
) -> Iterator[Path]:
    """Yield every candidate audio file beneath ``root``.

    Directories are visited depth-first in filesystem enumeration order.
    Symbolic links are never followed. A directory that cannot be listed or
    an entry whose type cannot be read is passed to ``on_error`` and skipped,
    so the rest of the tree is still visited.

    Args:
        root: Directory to enumerate.
        recurse: Descend into subdirectories when True.
        on_error: Receives ``DirectoryReadError``/``EntryMetadataError``
            instances. Defaults to logging a warning.

    Yields:
        Path: Absolute (when ``root`` is absolute) path of each candidate.
    """
    report = on_error or report_walk_error

    pending: list[Iterator[os.DirEntry[str]]] = []
    listing = _list_directory(root, report)
    if listing is not None:
        pending.append(listing)

    while pending:
        entry = next(pending[-1], None)
        if entry is None:
            _ = pending.pop()
            continue

        entry_path = Path(entry.path)
        try:
            is_directory = entry.is_dir(follow_symlinks=False)
            is_regular_file = not is_directory and entry.is_file(follow_symlinks=False)
        except OSError as exc:
            report(EntryMetadataError(entry_path, exc))
            continue

        if is_directory:
            if not recurse:
                continue
            child_listing = _list_directory(entry_path, report)
            if child_listing is not None:
                pending.append(child_listing)
        elif is_regular_file and is_audio_candidate(entry_path):
            yield entry_path


def _list_directory(
    directory: Path, report: WalkErrorCallback
) -> Iterator[os.DirEntry[str]] | None:
    try:
        with os.scandir(directory) as scanner:
            entries = list(scanner)
    except OSError as exc:
        report(DirectoryReadError(directory, exc))
        return None
    return iter(entries)


__all__ = ["WalkErrorCallback", "collect_audio_files", "report_walk_error"]
