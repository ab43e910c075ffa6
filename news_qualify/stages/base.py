"""Base classes for filter stages."""

from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from ..utils.data_utils import as_log_value
from ..utils.logging import log_path, reset_log, write_jsonl

REASON_COLUMN = "exclusion_reason"


@dataclass(frozen=True)
class StageResult:
    """Partition of a stage's input into kept and excluded records."""

    kept: pd.DataFrame
    excluded: pd.DataFrame


class FilterStage:
    """A pure partitioning rule with a single exclusion reason.

    Subclasses implement ``exclusion_mask``. ``apply`` never mutates its
    input; both partitions are fresh copies that keep the input's index
    labels, so a record's original position survives every stage.
    """

    name: str = "stage"
    reason: str = "excluded"
    log_filename: Optional[str] = None

    def exclusion_mask(self, records: pd.DataFrame) -> pd.Series:
        """Return a boolean Series aligned with ``records``; True means exclude."""
        raise NotImplementedError

    def apply(self, records: pd.DataFrame) -> StageResult:
        return self.partition(records, self.exclusion_mask(records))

    def partition(
        self,
        records: pd.DataFrame,
        mask: pd.Series,
        annotations: Optional[Dict[str, pd.Series]] = None,
    ) -> StageResult:
        """Split ``records`` on ``mask`` and tag the excluded side.

        Args:
            records: Stage input
            mask: Boolean Series, True for rows to exclude
            annotations: Extra columns to attach to the excluded rows only

        Returns:
            StageResult with kept and excluded partitions
        """
        mask = mask.reindex(records.index, fill_value=False).astype(bool)
        kept = records.loc[~mask].copy()
        excluded = records.loc[mask].copy()
        for col, values in (annotations or {}).items():
            excluded[col] = values.loc[excluded.index]
        excluded[REASON_COLUMN] = self.reason
        return StageResult(kept=kept, excluded=excluded)

    def log_fields(self, row) -> Dict[str, Optional[str]]:
        return {}

    def write_log(self, excluded: pd.DataFrame, log_dir: Optional[str]):
        """Write one audit line per excluded record into this stage's log."""
        if not self.log_filename:
            return
        path = reset_log(log_dir, self.log_filename)
        if path is None or excluded.empty:
            return
        logs: List[dict] = []
        for position, row in excluded.iterrows():
            entry = {
                "stage": self.name,
                "position": int(position),
                "url": as_log_value(row.get("url")),
                "domain": as_log_value(row.get("domain")),
                "reason": row[REASON_COLUMN],
            }
            entry.update(self.log_fields(row))
            logs.append(entry)
        write_jsonl(log_path(log_dir, self.log_filename), logs)
