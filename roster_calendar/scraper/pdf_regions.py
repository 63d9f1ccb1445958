"""Positional text extraction of the fixed roster page regions."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

import pdfplumber

from roster_calendar import config
from roster_calendar.filters.stop_markers import contains_any

logger = logging.getLogger(__name__)

BBox = Tuple[float, float, float, float]


@contextmanager
def open_roster(path: Path) -> Iterator["pdfplumber.PDF"]:
    """Open the roster PDF; missing files raise FileNotFoundError."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {path}")
    with pdfplumber.open(path) as pdf:
        yield pdf


def clamp_bbox(bbox: BBox, page_bbox: BBox) -> BBox:
    """Intersect ``bbox`` with the page so cropping never leaves the page."""
    x0, top, x1, bottom = bbox
    px0, ptop, px1, pbottom = page_bbox
    return (max(x0, px0), max(top, ptop), min(x1, px1), min(bottom, pbottom))


def region_text(page, bbox: BBox) -> str:
    """Text of one rectangular region, in reading order."""
    cropped = page.crop(clamp_bbox(bbox, page.bbox))
    return cropped.extract_text() or ""


def period_header_text(pdf) -> str:
    """Header text of the first page, where the roster period is printed."""
    if not pdf.pages:
        return ""
    return region_text(pdf.pages[0], config.PERIOD_REGION)


def is_skipped_page(page, markers: Sequence[str] = config.SKIP_PAGE_MARKERS) -> bool:
    return contains_any(region_text(page, config.HEADER_REGION), markers)


def iter_column_blocks(
    pdf,
    regions: Sequence[BBox] = config.COLUMN_REGIONS,
) -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(page_number, [column texts])`` for every schedule page.

    Pages whose header names a statistics section are skipped entirely.
    Columns come back left to right.
    """
    for page_number, page in enumerate(pdf.pages, start=1):
        if is_skipped_page(page):
            logger.info(f"Skipping page {page_number} (standby / statistics)")
            continue
        yield page_number, [region_text(page, bbox) for bbox in regions]
