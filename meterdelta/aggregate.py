from __future__ import annotations
from typing import Literal, Optional

from . import engine, exceptions, ingest, utils
from .config import DeltaConfig
from .types import DeltaResult, MonthKey, MonthlyConsumption

Method = Literal["previous_month", "intra_month"]

_METHODS = {
    "previous_month": engine.compute_monthly_delta,
    "intra_month": engine.compute_intra_month_delta,
}


def resolved_value(result: DeltaResult) -> float:
    """
    The number a result contributes to net usage:
      - Numeric: the delta
      - SingleSample / FirstMeasurement: the carried reading
      - NoChange / Empty: 0.0
    """
    return result.value_or_zero()


def calculate_monthly_consumption(
    feed: Optional[ingest.SeriesLike],
    consumption: Optional[ingest.SeriesLike],
    target: MonthKey,
    *,
    config: Optional[DeltaConfig] = None,
    method: Method = "previous_month",
) -> MonthlyConsumption:
    """Monthly feed-in and consumption deltas plus net consumption (consumption - feed)."""
    compute = _METHODS.get(method)
    exceptions.require(
        compute is not None,
        f"Unknown method {method!r}; expected one of {sorted(_METHODS)}",
        exceptions.AggregationError,
    )
    cfg = config or DeltaConfig()

    feed_result = compute(feed, target, config=cfg)
    consumption_result = compute(consumption, target, config=cfg)
    net = utils.round_half_away(
        resolved_value(consumption_result) - resolved_value(feed_result), cfg.decimals
    )

    return MonthlyConsumption(
        target=target,
        feed_monthly=feed_result,
        consumption_monthly=consumption_result,
        net_consumption=net,
    )
