"""Rich console handler for sweep diagnostics."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SweepRichHandler(RichHandler):
    """Render structured sweep events as one styled line each.

    Records without a ``sweep_event`` attribute fall back to the stock
    ``RichHandler`` rendering.
    """

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "sweep.directory.start": ("🔎", "cyan"),
        "sweep.directory.no_files": ("ℹ️", "yellow"),
        "sweep.directory.error": ("❌", "red"),
        "sweep.walk.error": ("⚠️", "yellow"),
        "sweep.file.read": ("🎧", "blue"),
        "sweep.file.skip": ("↪️", "yellow"),
        "sweep.playlist.written": ("📝", "magenta"),
        "sweep.playlist.error": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "sweep.directory.start": "Sweeping",
        "sweep.directory.no_files": "No audio files found",
        "sweep.directory.error": "Sweep failed",
        "sweep.walk.error": "Skipped branch",
        "sweep.file.read": "Read",
        "sweep.file.skip": "Skipped",
        "sweep.playlist.written": "Wrote playlist",
        "sweep.playlist.error": "Playlist not written",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact console settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with the leading segments elided."""

        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative = pure_path.relative_to(base_path)
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display_path = relative

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        parts = [part for part in display_path.parts if part and part != anchor]

        rendered = anchor
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]
            rendered = "…" + separator
        rendered += separator.join(parts)
        return self._style_path_string(rendered or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Colour separators magenta and path segments white."""

        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_sweep_message(self, record: logging.LogRecord) -> Text | None:
        """Render a structured sweep event, or ``None`` for plain records."""

        event = getattr(record, "sweep_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        base = getattr(record, "directory", None)
        base = str(base) if base else None

        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        _ = body.append(self._EVENT_LABELS.get(event, event))

        target = getattr(record, "source_path", None) or getattr(record, "playlist_path", None)
        if target:
            _ = body.append(" ")
            _ = body.append_text(self._format_path(str(target), base=base))

        details: list[str] = []
        track_count = getattr(record, "track_count", None)
        if isinstance(track_count, int):
            details.append(f"tracks={track_count}")
        artist = getattr(record, "artist", None)
        title = getattr(record, "title", None)
        label = " - ".join(part for part in (artist, title) if part)
        if label:
            details.append(label)
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        if base and not target:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(base))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for sweep events."""

        sweep_text = self._render_sweep_message(record)
        if sweep_text is not None:
            return sweep_text
        return super().render_message(record, message)


__all__ = ["SweepRichHandler"]
