from __future__ import annotations

from dataclasses import dataclass, field

from . import canon


@dataclass
class DeltaConfig:
    # Precision of computed deltas and the net figure
    decimals: int = canon.DEFAULT_DECIMALS


@dataclass
class ReportConfig:
    unit: str = canon.DEFAULT_UNIT
    feed_label: str = "Feed-in (EPm)"
    consumption_label: str = "Consumption (EPp)"
    net_label: str = "Net consumption"


@dataclass
class MeterDeltaConfig:
    delta: DeltaConfig = field(default_factory=DeltaConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def default_config() -> MeterDeltaConfig:
    return MeterDeltaConfig()
