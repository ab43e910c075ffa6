"""Record schema: required input fields, published columns and value coercion."""

from typing import Iterable, List

import numpy as np
import pandas as pd

from .errors import SchemaViolationError

# Fields every input collection must carry before any stage runs
REQUIRED_COLUMNS = ["url", "date_time", "domain", "author", "headline", "text", "paywall"]

# Published schema, in column order
FINAL_COLUMNS = [
    "id",
    "domain",
    "url",
    "date_time",
    "headline",
    "author",
    "text",
    "paywall",
    "text_length",
]

# Columns the normalizer derives itself
DERIVED_COLUMNS = ["id", "text_length"]

_TRUE_STRINGS = {"true", "t", "1", "yes"}
_FALSE_STRINGS = {"false", "f", "0", "no"}


def missing_columns(df: pd.DataFrame, required: Iterable[str]) -> List[str]:
    """Return the required columns absent from ``df``, in declared order."""
    return [col for col in required if col not in df.columns]


def validate_input_schema(df: pd.DataFrame):
    """Fail if the loaded collection lacks any required field.

    Raises:
        SchemaViolationError: If a required column is missing
    """
    missing = missing_columns(df, REQUIRED_COLUMNS)
    if missing:
        raise SchemaViolationError(f"Input is missing required columns: {missing}")


def coerce_paywall_value(value) -> int:
    """Map one paywall value onto 1/0.

    Accepts booleans, 0/1 numbers and the usual true/false spellings.

    Raises:
        SchemaViolationError: For missing or unrecognized values
    """
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_STRINGS:
            return 1
        if token in _FALSE_STRINGS:
            return 0
        raise SchemaViolationError(f"Unrecognized paywall value: {value!r}")
    if value is None or pd.isna(value):
        raise SchemaViolationError("Missing paywall value")
    if isinstance(value, (int, float, np.integer, np.floating)) and value in (0, 1):
        return int(value)
    raise SchemaViolationError(f"Unrecognized paywall value: {value!r}")


def coerce_paywall(series: pd.Series) -> pd.Series:
    """Coerce a paywall column to integer 1/0, failing on anything else."""
    return pd.Series(
        [coerce_paywall_value(v) for v in series],
        index=series.index,
        dtype="int64",
        name=series.name,
    )


def count_words(text) -> int:
    """Count whitespace-delimited tokens; missing text counts as zero."""
    if text is None:
        return 0
    if not isinstance(text, str):
        if pd.isna(text):
            return 0
        text = str(text)
    return len(text.split())
