from . import (
    canon,
    exceptions,
    types,
    config,
    utils,
    ingest,
    validate,
    engine,
    aggregate,
    formats,
)
from .aggregate import calculate_monthly_consumption, resolved_value
from .engine import compute_intra_month_delta, compute_monthly_delta
from .types import (
    DeltaResult,
    Empty,
    FirstMeasurement,
    MonthKey,
    MonthlyConsumption,
    NoChange,
    Numeric,
    Sample,
    SingleSample,
)

__all__ = [
    "canon",
    "exceptions",
    "types",
    "config",
    "utils",
    "ingest",
    "validate",
    "engine",
    "aggregate",
    "formats",
    "calculate_monthly_consumption",
    "resolved_value",
    "compute_monthly_delta",
    "compute_intra_month_delta",
    "DeltaResult",
    "Empty",
    "FirstMeasurement",
    "MonthKey",
    "MonthlyConsumption",
    "NoChange",
    "Numeric",
    "Sample",
    "SingleSample",
]
