from __future__ import annotations
from typing import List
from pydantic import AliasChoices, BaseModel, Field

from . import canon


class SampleRecord(BaseModel):
    """A single cumulative reading as found in JSON input.

    Attributes:
        ts: Milliseconds since the Unix epoch (UTC); also read from
            timestamp, time, t_start, datetime or date
        value: Cumulative counter value in the target unit; also read from
            kwh, reading or energy
    """

    ts: int = Field(validation_alias=AliasChoices(*canon.COMMON_TIMESTAMP_NAMES))
    value: float = Field(validation_alias=AliasChoices(*canon.COMMON_VALUE_NAMES))
    model_config = {"frozen": True}


class MeterPayload(BaseModel):
    """Feed-in and consumption readings of one meter.

    Attributes:
        feed: Feed-in (export) counter readings
        consumption: Consumption (import) counter readings
    """

    feed: List[SampleRecord] = Field(default_factory=list)
    consumption: List[SampleRecord] = Field(default_factory=list)
