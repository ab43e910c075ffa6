"""Duplicate-URL stage - keep the first occurrence of every URL."""

import pandas as pd

from ..config import DUPLICATE_LOG, REASON_DUPLICATE
from .base import FilterStage


class DuplicateUrlStage(FilterStage):
    """Exclude every record whose ``url`` already appeared earlier in the input.

    Missing URLs compare equal to each other, so only the first of them survives.
    """

    name = "duplicate"
    reason = REASON_DUPLICATE
    log_filename = DUPLICATE_LOG

    def exclusion_mask(self, records: pd.DataFrame) -> pd.Series:
        return records.duplicated(subset="url", keep="first")
