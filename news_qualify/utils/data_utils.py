"""Data manipulation utility functions."""

from typing import Any, Iterator, List, Optional

import pandas as pd


def batched(xs: List[Any], n: int) -> Iterator[List[Any]]:
    """Yield successive n-sized chunks from a list.

    Args:
        xs: List to batch
        n: Batch size

    Yields:
        Batches of size n (last batch may be smaller)
    """
    for i in range(0, len(xs), n):
        yield xs[i:i+n]


def as_log_value(value) -> Optional[str]:
    """Render a cell for a JSONL log line (missing values become null)."""
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    return str(value)
