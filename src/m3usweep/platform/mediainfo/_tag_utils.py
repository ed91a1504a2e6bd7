"""Tag utility helpers.

Where: src/m3usweep/platform/mediainfo/_tag_utils.py
What: Pure helpers for reading the first value of a tag and parsing numbers.
Why: Mutagen returns lists, ID3 frames or ASF attributes depending on the
container; callers only want text.
"""

from __future__ import annotations

__all__ = [
    "first_text",
    "parse_slash_separated",
]


def first_text(value: object) -> str:
    """Return the first textual value held by a tag, or ``""`` when absent.

    Handles plain strings, lists of values, ID3 frames (``.text``) and ASF
    attributes (``.value``).
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return first_text(value[0]) if value else ""
    frame_text = getattr(value, "text", None)
    if frame_text is not None:
        return first_text(frame_text)
    attribute_value = getattr(value, "value", None)
    if attribute_value is not None:
        return first_text(attribute_value) if isinstance(attribute_value, str) else str(attribute_value)
    return str(value)


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = value.strip().split(sep="/") if value else []
    num: int | None = int(parts[0]) if parts and parts[0].strip().isdecimal() else None
    total: int | None = (
        int(parts[1]) if len(parts) > 1 and parts[1].strip().isdecimal() else None
    )
    return num, total
