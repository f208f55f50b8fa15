from __future__ import annotations

from typing import Optional

from . import canon, utils
from .config import ReportConfig
from .types import (
    ConsumptionPayload,
    DeltaPayload,
    DeltaResult,
    MonthlyConsumption,
    SingleSample,
)


def to_payload(result: DeltaResult) -> DeltaPayload:
    """
    Serialise a result to a plain dict.

    Fallback kinds carry an 'info' text next to their value; NoChange and
    Empty are rendered with value 0.
    """
    payload: DeltaPayload = {"kind": result.kind, "value": result.value_or_zero()}
    if isinstance(result, SingleSample):
        payload["timestamp"] = result.timestamp
    info = canon.INFO_TEXT.get(result.kind)
    if info is not None:
        payload["info"] = info
    return payload


def consumption_payload(mc: MonthlyConsumption) -> ConsumptionPayload:
    return {
        "target": mc.target.label,
        "feed_monthly": to_payload(mc.feed_monthly),
        "consumption_monthly": to_payload(mc.consumption_monthly),
        "net_consumption": mc.net_consumption,
    }


def _fmt(value: float, unit: str) -> str:
    return f"{value} {unit}" if unit else f"{value}"


def describe(result: DeltaResult, *, unit: str = canon.DEFAULT_UNIT) -> str:
    """One line of text for a result; fallback kinds are explained, not just printed."""
    if result.kind == "numeric":
        return _fmt(result.value_or_zero(), unit)

    info = canon.INFO_TEXT[result.kind]
    if isinstance(result, SingleSample):
        at = utils.utc_timestamp(result.timestamp).isoformat()
        return f"{_fmt(result.value, unit)} ({info}, at {at})"
    if result.kind == "first_measurement":
        return f"{_fmt(result.value_or_zero(), unit)} ({info})"
    return info


def render_report(mc: MonthlyConsumption, *, config: Optional[ReportConfig] = None) -> str:
    cfg = config or ReportConfig()
    lines = [
        f"Monthly usage {mc.target.label}:",
        f"{cfg.feed_label}: {describe(mc.feed_monthly, unit=cfg.unit)}",
        f"{cfg.consumption_label}: {describe(mc.consumption_monthly, unit=cfg.unit)}",
        f"{cfg.net_label}: {_fmt(mc.net_consumption, cfg.unit)}",
    ]
    return "\n".join(lines)
