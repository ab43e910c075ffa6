"""Finalize stage - reindex, coerce and project kept records onto the published schema."""

import pandas as pd

from ..errors import SchemaViolationError
from ..schema import DERIVED_COLUMNS, FINAL_COLUMNS, coerce_paywall, count_words, missing_columns
from .date_range_stage import parse_date_times


def normalize_records(records: pd.DataFrame) -> pd.DataFrame:
    """Turn the surviving records into the published dataset.

    Assigns ``id`` as 1..N in row order (any earlier ids are discarded),
    coerces ``paywall`` to 1/0 and ``date_time`` to UTC, computes
    ``text_length`` as a word count and keeps only the published columns.
    Running it again on its own output changes nothing.

    Args:
        records: Records that passed every filter stage

    Returns:
        New DataFrame with columns in published order and a fresh RangeIndex

    Raises:
        SchemaViolationError: If a published field is absent or paywall is unrecognized
    """
    required = [col for col in FINAL_COLUMNS if col not in DERIVED_COLUMNS]
    missing = missing_columns(records, required)
    if missing:
        raise SchemaViolationError(f"Cannot normalize, missing columns: {missing}")

    df = records.reset_index(drop=True).copy()
    df["id"] = range(1, len(df) + 1)
    df["paywall"] = coerce_paywall(df["paywall"])
    df["date_time"] = parse_date_times(df["date_time"])
    df["text_length"] = pd.Series([count_words(t) for t in df["text"]], index=df.index, dtype="int64")
    return df[FINAL_COLUMNS]
