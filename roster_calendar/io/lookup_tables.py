"""Loading of the semicolon-delimited duty and location lookup tables."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping

from roster_calendar import config

logger = logging.getLogger(__name__)

EMPTY_TABLE: Mapping[str, str] = MappingProxyType({})


def load_lookup_table(path: Path, delimiter: str = config.TABLE_DELIMITER) -> Mapping[str, str]:
    """Read ``key;value`` rows into a read-only mapping.

    Only the first two fields of a row are used, both trimmed; shorter rows
    are ignored. A missing or unreadable file gives an empty table.
    """
    table: Dict[str, str] = {}
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            for row in csv.reader(handle, delimiter=delimiter):
                if len(row) >= 2:
                    table[row[0].strip()] = row[1].strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Could not load {path}: {exc}")
        return EMPTY_TABLE

    logger.info(f"Loaded {len(table)} entries from {Path(path).name}")
    return MappingProxyType(table)


def load_duty_titles(path: Path = config.DUTY_TABLE_PATH) -> Mapping[str, str]:
    """Duty code -> display title."""
    return load_lookup_table(path)


def load_location_zones(path: Path = config.LOCATION_TABLE_PATH) -> Mapping[str, str]:
    """Location code -> tz database name."""
    return load_lookup_table(path)
