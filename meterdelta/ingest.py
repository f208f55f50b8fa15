from __future__ import annotations
import pandas as pd
from pandas.api import types as ptypes
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from . import canon, utils, validate
from .exceptions import IngestError
from .schema import MeterPayload
from .types import Sample

SeriesLike = Union[Iterable[Sample], Iterable[Mapping[str, Any]], pd.DataFrame]


def empty_frame() -> pd.DataFrame:
    """Return an empty sample frame with the canonical dtypes."""
    return pd.DataFrame(
        {
            canon.TS_COL: pd.Series([], dtype="int64"),
            canon.VALUE_COL: pd.Series([], dtype="float64"),
        }
    )


def _pick(keys: Iterable[str], candidates: tuple[str, ...]) -> Optional[str]:
    lowered = {str(k).lower(): k for k in keys}
    return next((lowered[c] for c in candidates if c in lowered), None)


def _build(ts: Iterable[Any], values: Iterable[Any]) -> pd.DataFrame:
    try:
        df = pd.DataFrame(
            {
                canon.TS_COL: pd.Series(list(ts), dtype="int64"),
                canon.VALUE_COL: pd.Series(list(values), dtype="float64"),
            }
        )
    except (TypeError, ValueError) as e:
        raise IngestError(f"Could not coerce samples to (int ts, float value): {e}") from e
    validate.assert_samples(df)
    return df


def from_records(records: Iterable[Sample | Mapping[str, Any]]) -> pd.DataFrame:
    """
    Build a sample frame from Sample objects or mappings.

    Mappings may use any of the common timestamp keys (ts, timestamp, ...) and
    value keys (value, kwh, ...).
    """
    ts: list[Any] = []
    values: list[Any] = []
    for rec in records:
        if isinstance(rec, Sample):
            ts.append(rec.ts)
            values.append(rec.value)
            continue
        if not isinstance(rec, Mapping):
            raise IngestError(f"Unsupported sample type: {type(rec).__name__}")
        tkey = _pick(rec.keys(), canon.COMMON_TIMESTAMP_NAMES)
        vkey = _pick(rec.keys(), canon.COMMON_VALUE_NAMES)
        if tkey is None or vkey is None:
            raise IngestError(
                f"Record {dict(rec)!r} needs a timestamp key and a value key."
            )
        ts.append(rec[tkey])
        values.append(rec[vkey])

    if not ts:
        return empty_frame()
    return _build(ts, values)


def from_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalise a DataFrame of readings to the canonical sample frame:
      - 'ts': int64 epoch ms (datetime index/column converted, naive read as UTC)
      - 'value': float64
    The input frame is never modified.
    """
    if df.empty and not isinstance(df.index, pd.DatetimeIndex):
        return empty_frame()

    vcol = _pick(df.columns, canon.COMMON_VALUE_NAMES)
    if vcol is None:
        raise IngestError(
            "No value column found. Expected one of: value, kwh, reading, energy."
        )

    if isinstance(df.index, pd.DatetimeIndex):
        ts = utils.to_epoch_ms(df.index)
    else:
        tcol = _pick(df.columns, canon.COMMON_TIMESTAMP_NAMES)
        if tcol is None:
            raise IngestError(
                "No timestamp column found and index is not datetime. "
                "Expected one of: ts, timestamp, time, t_start, datetime, date."
            )
        col = df[tcol]
        if ptypes.is_datetime64_any_dtype(col):
            ts = utils.to_epoch_ms(col)
        else:
            ts = col.to_numpy()

    return _build(ts, df[vcol].to_numpy())


def to_frame(series: Optional[SeriesLike]) -> pd.DataFrame:
    """Any accepted series shape -> fresh canonical sample frame."""
    if series is None:
        return empty_frame()
    if isinstance(series, pd.DataFrame):
        return from_dataframe(series)
    return from_records(series)


def to_samples(series: Optional[SeriesLike]) -> list[Sample]:
    df = to_frame(series)
    return [
        Sample(int(t), float(v))
        for t, v in zip(df[canon.TS_COL].to_numpy(), df[canon.VALUE_COL].to_numpy())
    ]


def from_json(payload: str | bytes | Mapping[str, Any]) -> tuple[list[Sample], list[Sample]]:
    """
    Parse {"feed": [...], "consumption": [...]} into two Sample lists.
    """
    try:
        if isinstance(payload, Mapping):
            model = MeterPayload.model_validate(payload)
        else:
            model = MeterPayload.model_validate_json(payload)
    except ValidationError as e:
        raise IngestError(f"Invalid meter payload: {e}") from e

    feed = [Sample(r.ts, r.value) for r in model.feed]
    consumption = [Sample(r.ts, r.value) for r in model.consumption]
    return feed, consumption


def read_json(path: str) -> tuple[list[Sample], list[Sample]]:
    with open(path, "rb") as fh:
        return from_json(fh.read())
