"""Configuration constants for the duty roster to calendar converter."""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Working directory
# ---------------------------------------------------------------------------

WORKING_DIR = Path.cwd()

# ---------------------------------------------------------------------------
# Input / output files (fixed names in the working directory)
# ---------------------------------------------------------------------------

INPUT_PDF = Path(os.getenv("ROSTER_INPUT_PDF", WORKING_DIR / "dutyplan.pdf"))
OUTPUT_ICS = Path(os.getenv("ROSTER_OUTPUT_ICS", WORKING_DIR / "roster.ics"))
OUTPUT_CSV = Path(os.getenv("ROSTER_OUTPUT_CSV", WORKING_DIR / "roster.csv"))

# Lookup tables: "<key>;<value>" per line
DUTY_TABLE_PATH = Path(os.getenv("ROSTER_DUTY_TABLE", WORKING_DIR / "Dienste.txt"))
LOCATION_TABLE_PATH = Path(os.getenv("ROSTER_LOCATION_TABLE", WORKING_DIR / "IATA.csv"))
TABLE_DELIMITER = ";"

# ---------------------------------------------------------------------------
# Page regions, (x0, top, x1, bottom) in PDF points
# ---------------------------------------------------------------------------

PERIOD_REGION = (0, 0, 300, 100)
HEADER_REGION = (0, 0, 600, 150)
LEFT_COLUMN_REGION = (20, 120, 290, 770)
RIGHT_COLUMN_REGION = (293, 120, 563, 770)
COLUMN_REGIONS = (LEFT_COLUMN_REGION, RIGHT_COLUMN_REGION)

# Pages whose header contains any of these are statistics pages
SKIP_PAGE_MARKERS = ("Standby points", "Crew Information")

# Trailing footer content inside a column
STOP_MARKERS = ("Vacation Claim", "Hotels", "Crew Information", "Standby points")

# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

CARRIER_MARKER = "EW"
DUTY_MARKERS = ("C/I", "Pick Up", "S/U")
OFF_DUTY_CODES = (
    "OFF", "O_M", "O_U", "F", "VAC", "KCC-VAC", "KCC-FLD",
    "KCC-OFF", "DISP", "DISP_FIX", "U", "MEETING",
)

# Duties carry a single clock reading; they get a nominal length
DUTY_DURATION_MINUTES = 30

# ---------------------------------------------------------------------------
# Timezones
# ---------------------------------------------------------------------------

DEFAULT_TIMEZONE = "UTC"
FALLBACK_TIMEZONE = "Europe/Berlin"

# False restores the legacy behaviour of building instants in the
# process-local zone and only carrying the resolved zone as metadata.
APPLY_LOCATION_TIMEZONE = os.getenv("ROSTER_APPLY_LOCATION_TZ", "1") not in {"0", "false", "False"}

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

CALENDAR_CREATOR = "-//Roster Calendar//ics//EN"

# Also write OUTPUT_CSV next to the calendar
EXPORT_CSV = os.getenv("ROSTER_EXPORT_CSV", "0") in {"1", "true", "True"}
