from __future__ import annotations
from typing import ClassVar, Literal, TypedDict, Union
from dataclasses import dataclass

from . import exceptions

DeltaKind = Literal["numeric", "single_sample", "first_measurement", "no_change", "empty"]


@dataclass(frozen=True)
class Sample:
    """One cumulative meter reading.

    ts is milliseconds since the Unix epoch (UTC); value is already in the
    target unit (usually kWh).
    """

    ts: int
    value: float


@dataclass(frozen=True)
class MonthKey:
    """Calendar month in UTC; month is 0-based (0 = January)."""

    year: int
    month: int

    def __post_init__(self):
        exceptions.require(
            0 <= self.month <= 11,
            f"month must be in [0, 11] (0-based), got {self.month}",
            exceptions.MonthKeyError,
        )

    @classmethod
    def from_calendar(cls, year: int, month: int) -> "MonthKey":
        """Build from a 1-based calendar month (1 = January)."""
        return cls(year, month - 1)

    def previous(self) -> "MonthKey":
        if self.month == 0:
            return MonthKey(self.year - 1, 11)
        return MonthKey(self.year, self.month - 1)

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}"


## Delta results
@dataclass(frozen=True)
class Numeric:
    value: float
    kind: ClassVar[DeltaKind] = "numeric"

    def value_or_zero(self) -> float:
        return self.value


@dataclass(frozen=True)
class SingleSample:
    """Exactly one reading fell in the target month; reported as-is."""

    value: float
    timestamp: int
    kind: ClassVar[DeltaKind] = "single_sample"

    def value_or_zero(self) -> float:
        return self.value


@dataclass(frozen=True)
class FirstMeasurement:
    """No baseline in the previous month; value is the cumulative total."""

    value: float
    kind: ClassVar[DeltaKind] = "first_measurement"

    def value_or_zero(self) -> float:
        return self.value


@dataclass(frozen=True)
class NoChange:
    kind: ClassVar[DeltaKind] = "no_change"

    def value_or_zero(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Empty:
    kind: ClassVar[DeltaKind] = "empty"

    def value_or_zero(self) -> float:
        return 0.0


DeltaResult = Union[Numeric, SingleSample, FirstMeasurement, NoChange, Empty]


@dataclass(frozen=True)
class MonthlyConsumption:
    target: MonthKey
    feed_monthly: DeltaResult
    consumption_monthly: DeltaResult
    net_consumption: float


# Serialised shapes
class DeltaPayload(TypedDict, total=False):
    kind: DeltaKind
    value: float
    timestamp: int
    info: str


class ConsumptionPayload(TypedDict):
    target: str
    feed_monthly: DeltaPayload
    consumption_monthly: DeltaPayload
    net_consumption: float
