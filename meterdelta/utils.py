# meterdelta/utils.py
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP

import numpy as np
import pandas as pd

from . import canon
from .types import MonthKey


def round_half_away(x: float, decimals: int = canon.DEFAULT_DECIMALS) -> float:
    """
    Round to `decimals` places, halves away from zero.

    Works on the shortest repr of the float, so 2156.425 -> 2156.43 the way
    fixed-point formatting of the reading would show it. A negative zero
    result comes back as 0.0; non-finite input is returned unchanged.
    """
    if not np.isfinite(x):
        return float(x)
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(x))).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0


def round2(x: float) -> float:
    return round_half_away(x, 2)


def utc_months(ts: pd.Series) -> pd.DataFrame:
    """Return 'year' and 0-based 'month' columns for epoch-ms timestamps (UTC).

    Decoded at millisecond resolution with numpy, so readings outside the
    nanosecond Timestamp range (1677-2262) are handled too.
    """
    months = (
        ts.to_numpy(dtype="int64").astype("datetime64[ms]").astype("datetime64[M]")
    ).astype("int64")
    return pd.DataFrame(
        {"year": months // 12 + 1970, "month": months % 12},
        index=ts.index,
    )


def month_mask(ts: pd.Series, key: MonthKey) -> pd.Series:
    """Boolean mask of timestamps falling in the given UTC calendar month."""
    ym = utc_months(ts)
    return (ym["year"] == key.year) & (ym["month"] == key.month)


def utc_timestamp(ts_ms: int) -> pd.Timestamp:
    """Epoch ms -> tz-aware UTC Timestamp, kept at millisecond resolution."""
    return pd.Timestamp(np.datetime64(int(ts_ms), "ms")).tz_localize("UTC")


def to_epoch_ms(values: pd.Series | pd.DatetimeIndex) -> np.ndarray:
    """
    Datetime-like values -> int64 epoch milliseconds.
    Naive timestamps are read as UTC.
    """
    dt = pd.DatetimeIndex(pd.to_datetime(values))
    if dt.tz is None:
        dt = dt.tz_localize("UTC")
    else:
        dt = dt.tz_convert("UTC")
    return dt.as_unit("ms").asi8.astype("int64")
