from __future__ import annotations
import pandas as pd
from pandas.api import types as ptypes

from . import canon, exceptions


def assert_samples(df: pd.DataFrame) -> None:
    for col in canon.REQUIRED_COLS:
        if col not in df.columns:
            raise exceptions.SampleFrameError(f"Missing required column '{col}'.")
    if not ptypes.is_integer_dtype(df[canon.TS_COL]):
        raise exceptions.SampleFrameError(
            f"Column '{canon.TS_COL}' must hold integer epoch milliseconds."
        )
    if not ptypes.is_float_dtype(df[canon.VALUE_COL]):
        raise exceptions.SampleFrameError(
            f"Column '{canon.VALUE_COL}' must be float, got {df[canon.VALUE_COL].dtype}."
        )

