"""Date-range stage - drop records published outside the inclusive UTC window."""

import pandas as pd

from ..config import (
    DATE_RANGE_LOG, DEFAULT_MISSING_DATE_POLICY, MISSING_DATE_POLICIES,
    REASON_OUT_OF_RANGE, to_utc_timestamp
)
from ..errors import SchemaViolationError
from ..utils.data_utils import as_log_value
from .base import FilterStage


def parse_date_times(values: pd.Series) -> pd.Series:
    """Parse a date_time column to UTC; unparseable entries become NaT.

    Numeric columns are read as seconds since the Unix epoch.
    """
    if pd.api.types.is_datetime64_any_dtype(values):
        if getattr(values.dt, "tz", None) is None:
            return values.dt.tz_localize("UTC")
        return values.dt.tz_convert("UTC")
    if values.isna().all():
        return pd.Series(pd.NaT, index=values.index, dtype="datetime64[ns, UTC]")
    if pd.api.types.is_numeric_dtype(values):
        # Numbers are epoch seconds
        return pd.to_datetime(values, unit="s", utc=True, errors="coerce")
    return pd.to_datetime(values, utc=True, errors="coerce", format="mixed")


class DateRangeStage(FilterStage):
    """Exclude records strictly before ``start`` or strictly after ``end``.

    Both bounds are inclusive. The parsed timestamps only drive the
    decision; kept records carry their original ``date_time`` value.
    Records without a usable timestamp follow ``missing_policy``:
    ``exclude`` tags them out_of_date_range, ``keep`` lets them through,
    ``fail`` aborts the run.
    """

    name = "date_range"
    reason = REASON_OUT_OF_RANGE
    log_filename = DATE_RANGE_LOG

    def __init__(self, start, end, missing_policy: str = DEFAULT_MISSING_DATE_POLICY):
        if missing_policy not in MISSING_DATE_POLICIES:
            raise ValueError(f"Unsupported missing date policy '{missing_policy}'")
        self.start = to_utc_timestamp(start)
        self.end = to_utc_timestamp(end)
        if self.start > self.end:
            raise ValueError(f"Date range start {self.start} is after end {self.end}")
        self.missing_policy = missing_policy

    def exclusion_mask(self, records: pd.DataFrame) -> pd.Series:
        parsed = parse_date_times(records["date_time"])
        missing = parsed.isna()
        if missing.any():
            print(f"[date_range] {int(missing.sum()):,} records have a missing or unparseable date_time (policy: {self.missing_policy})")
            if self.missing_policy == "fail":
                sample = records.loc[missing, "date_time"].head(5).tolist()
                raise SchemaViolationError(f"Records with unusable date_time: {sample}")
        # Comparisons against NaT are False, so missing values are never "outside"
        outside = (parsed < self.start) | (parsed > self.end)
        if self.missing_policy == "exclude":
            return outside | missing
        return outside & ~missing

    def log_fields(self, row):
        return {"date_time": as_log_value(row.get("date_time"))}
