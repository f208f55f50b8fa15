from __future__ import annotations
import pandas as pd
from typing import Optional

from . import canon, ingest, utils
from .config import DeltaConfig
from .log import get_logger
from .types import (
    DeltaResult,
    Empty,
    FirstMeasurement,
    MonthKey,
    NoChange,
    Numeric,
    SingleSample,
)

logger = get_logger(__name__)


def _sorted_frame(series: Optional[ingest.SeriesLike]) -> pd.DataFrame:
    # to_frame always builds a new frame, the caller's series is left untouched
    df = ingest.to_frame(series)
    return df.sort_values(canon.TS_COL, kind="stable", ignore_index=True)


def _in_month(df: pd.DataFrame, key: MonthKey) -> pd.DataFrame:
    return df.loc[utils.month_mask(df[canon.TS_COL], key)]


def _delta(current: float, baseline: float, decimals: int) -> DeltaResult:
    delta = utils.round_half_away(current - baseline, decimals)
    if delta == 0:
        return NoChange()
    return Numeric(delta)


def compute_monthly_delta(
    series: Optional[ingest.SeriesLike],
    target: MonthKey,
    *,
    config: Optional[DeltaConfig] = None,
) -> DeltaResult:
    """
    Usage during `target` from a cumulative series, measured against the last
    reading of the previous calendar month (UTC).

    Decision order, first match wins:
      - no readings at all, or none in the target month -> Empty
      - exactly one reading in the target month -> SingleSample (raw value, ts)
      - no reading in the previous month -> FirstMeasurement (raw value of the
        month's last reading, i.e. the cumulative total)
      - otherwise the rounded difference of the two last readings; NoChange
        when it is zero, Numeric otherwise

    Never raises for a well-formed series and never reorders the caller's data.
    Callers that need one number per result use `aggregate.resolved_value`.
    """
    cfg = config or DeltaConfig()
    df = _sorted_frame(series)
    log = logger.bind(target=target.label, samples=len(df))

    if df.empty:
        log.debug("monthly_delta.computed", kind=Empty.kind)
        return Empty()

    prior = _in_month(df, target.previous())
    current = _in_month(df, target)

    result: DeltaResult
    if current.empty:
        result = Empty()
    elif len(current) == 1:
        result = SingleSample(
            value=float(current[canon.VALUE_COL].iloc[0]),
            timestamp=int(current[canon.TS_COL].iloc[0]),
        )
    elif prior.empty:
        result = FirstMeasurement(value=float(current[canon.VALUE_COL].iloc[-1]))
    else:
        result = _delta(
            float(current[canon.VALUE_COL].iloc[-1]),
            float(prior[canon.VALUE_COL].iloc[-1]),
            cfg.decimals,
        )

    log.debug(
        "monthly_delta.computed",
        kind=result.kind,
        current_samples=len(current),
        prior_samples=len(prior),
    )
    return result


def compute_intra_month_delta(
    series: Optional[ingest.SeriesLike],
    target: MonthKey,
    *,
    config: Optional[DeltaConfig] = None,
) -> DeltaResult:
    """Difference between the first and last reading inside `target`.

    Fewer than two readings in the month gives Empty.
    """
    cfg = config or DeltaConfig()
    df = _sorted_frame(series)
    current = _in_month(df, target)

    result: DeltaResult
    if len(current) < 2:
        result = Empty()
    else:
        values = current[canon.VALUE_COL]
        result = _delta(float(values.iloc[-1]), float(values.iloc[0]), cfg.decimals)

    logger.debug(
        "intra_month_delta.computed",
        target=target.label,
        samples=len(df),
        current_samples=len(current),
        kind=result.kind,
    )
    return result
