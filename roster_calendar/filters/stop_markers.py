"""Cut trailing footer sections off a column text block."""

from __future__ import annotations

from typing import Iterable, Optional

from roster_calendar import config


def apply_stop_markers(
    text: Optional[str],
    markers: Iterable[str] = config.STOP_MARKERS,
) -> str:
    """Truncate ``text`` just before the earliest occurring stop marker."""
    text = text or ""
    positions = [index for index in (text.find(marker) for marker in markers if marker) if index != -1]
    if not positions:
        return text
    return text[: min(positions)]


def contains_any(text: Optional[str], markers: Iterable[str]) -> bool:
    """Return True when any marker occurs in the text."""
    text = text or ""
    return any(marker in text for marker in markers)
