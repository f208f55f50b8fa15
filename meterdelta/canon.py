from __future__ import annotations
from typing import Final, Dict

TS_COL: Final[str] = "ts"
VALUE_COL: Final[str] = "value"
REQUIRED_COLS: Final[list[str]] = [TS_COL, VALUE_COL]
DEFAULT_DECIMALS: Final[int] = 2
DEFAULT_UNIT: Final[str] = "kWh"
COMMON_TIMESTAMP_NAMES = ("ts", "timestamp", "time", "t_start", "datetime", "date")
COMMON_VALUE_NAMES = ("value", "kwh", "reading", "energy")

# Result kind -> explanatory text shown instead of a bare number
INFO_TEXT: Dict[str, str] = {
    "single_sample": "Only one reading in the month",
    "first_measurement": "First measurement, full cumulative reading taken as the monthly value",
    "no_change": "No change detected in the period",
    "empty": "No readings in the month",
}
