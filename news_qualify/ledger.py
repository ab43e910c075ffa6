"""Exclusion ledger - the accumulated record of every excluded article."""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from .stages.base import REASON_COLUMN


def union_columns(frames: Sequence[pd.DataFrame]) -> List[str]:
    """Union of column names across frames, in first-seen order."""
    columns: List[str] = []
    for frame in frames:
        for col in frame.columns:
            if col not in columns:
                columns.append(col)
    return columns


@dataclass(frozen=True, eq=False)
class ExclusionLedger:
    """Immutable list of excluded chunks, in stage order.

    ``add`` returns a new ledger; nothing is merged in place. Chunks keep
    the index labels they had in the stage input, i.e. the records'
    original positions.
    """

    chunks: Tuple[pd.DataFrame, ...] = ()
    base_columns: Tuple[str, ...] = ()

    @classmethod
    def for_records(cls, records: pd.DataFrame) -> "ExclusionLedger":
        """Empty ledger whose schema starts from the input's columns."""
        return cls(chunks=(), base_columns=tuple(records.columns) + (REASON_COLUMN,))

    def add(self, excluded: pd.DataFrame) -> "ExclusionLedger":
        if excluded.empty:
            return self
        return ExclusionLedger(chunks=self.chunks + (excluded,), base_columns=self.base_columns)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self.chunks)

    def to_frame(self) -> pd.DataFrame:
        """Concatenate all chunks under the union of their columns.

        Fields a chunk lacks are filled with the pandas missing marker.
        Rows stay in stage order, then in input order within each stage.
        """
        columns = union_columns([pd.DataFrame(columns=list(self.base_columns))] + list(self.chunks))
        if not self.chunks:
            return pd.DataFrame(columns=columns)
        aligned = [chunk.reindex(columns=columns) for chunk in self.chunks]
        if len(aligned) == 1:
            return aligned[0].copy()
        return pd.concat(aligned, axis=0, sort=False)

    def reason_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for chunk in self.chunks:
            for reason, n in chunk[REASON_COLUMN].value_counts(sort=False).items():
                counts[reason] = counts.get(reason, 0) + int(n)
        return counts
