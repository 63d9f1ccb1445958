"""Parser for exported roster event CSV files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from roster_calendar import config

logger = logging.getLogger(__name__)


def parse_events_csv(file_path: Optional[Path] = None) -> pd.DataFrame:
    """Parse an exported events CSV file.

    Args:
        file_path: Path to the events CSV file. Defaults to the configured output.

    Returns:
        DataFrame with event data; ``start``/``end`` as UTC timestamps.
    """
    file_path = Path(file_path or config.OUTPUT_CSV)
    if not file_path.exists():
        raise FileNotFoundError(f"Events file not found: {file_path}")

    df = pd.read_csv(file_path)

    for column in ("start", "end"):
        if column in df.columns:
            df[column] = pd.to_datetime(df[column], utc=True, errors="coerce", format="ISO8601")

    logger.info(f"Parsed {len(df)} events from {file_path.name}")
    return df


def get_events_summary(df: pd.DataFrame) -> dict:
    """Get summary statistics from an events DataFrame.

    Args:
        df: Events DataFrame.

    Returns:
        Dictionary with summary statistics.
    """
    summary = {
        "total_events": len(df),
        "all_day_events": 0,
        "date_range": None,
        "titles": {},
        "locations": set(),
    }

    if "all_day" in df.columns:
        summary["all_day_events"] = int(df["all_day"].astype(bool).sum())

    if "start" in df.columns and len(df) > 0:
        valid_starts = df["start"].dropna()
        if len(valid_starts) > 0:
            summary["date_range"] = {
                "start": valid_starts.min(),
                "end": valid_starts.max(),
            }

    if "title" in df.columns:
        summary["titles"] = df["title"].value_counts().to_dict()

    if "location" in df.columns:
        summary["locations"] = set(df["location"].dropna().unique())

    return summary
