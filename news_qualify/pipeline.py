"""Pipeline runner: ordered filter stages, exclusion ledger, normalization and outputs."""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .config import RUN_SUMMARY_LOG, PipelineConfig
from .ledger import ExclusionLedger
from .models.language_id import LanguageIdentifier
from .schema import validate_input_schema
from .stages import (
    DateRangeStage, DuplicateUrlStage, FilterStage, LanguageStage,
    format_summary, normalize_records, summarize_domains
)
from .utils.io_utils import ensure_output_dir, load_records, save_final_dataset, save_ledger
from .utils.logging import ensure_logdir, log_path, reset_log, write_jsonl


@dataclass(frozen=True, eq=False)
class FilterOutcome:
    """Records that survived every stage plus the ledger of the rest."""

    kept: pd.DataFrame
    ledger: ExclusionLedger


@dataclass(frozen=True, eq=False)
class QualificationResult:
    """Everything one run produced."""

    final: pd.DataFrame
    excluded: pd.DataFrame
    summary: pd.DataFrame
    input_count: int
    paths: Dict[str, Optional[str]] = field(default_factory=dict)


def build_stages(config: PipelineConfig, identifier) -> List[FilterStage]:
    """The filter stages in their fixed order: duplicate, date range, language."""
    return [
        DuplicateUrlStage(),
        DateRangeStage(config.range_start, config.range_end, config.missing_date_policy),
        LanguageStage(identifier, config.target_lang, config.detector_workers),
    ]


class QualificationPipeline:
    """Runs the filter stages over one snapshot and folds their exclusions.

    Each stage only sees what the previous stage kept, so an excluded
    record carries the reason of the first stage that rejected it.
    """

    def __init__(self, config: PipelineConfig, identifier=None, stages: Optional[Sequence[FilterStage]] = None):
        self.config = config
        if stages is None:
            if identifier is None:
                identifier = LanguageIdentifier(seed=config.detector_seed)
            stages = build_stages(config, identifier)
        self.stages = list(stages)

    def filter_records(self, records: pd.DataFrame) -> FilterOutcome:
        """Apply every stage in order.

        Args:
            records: The full input snapshot

        Returns:
            FilterOutcome; kept and ledger rows are indexed by original position
        """
        validate_input_schema(records)
        records = records.reset_index(drop=True)
        ensure_logdir(self.config.log_dir)

        kept = records
        ledger = ExclusionLedger.for_records(records)
        for stage in self.stages:
            before = len(kept)
            result = stage.apply(kept)
            stage.write_log(result.excluded, self.config.log_dir)
            print(f"[{stage.name}] {before:,} → kept {len(result.kept):,}, excluded {len(result.excluded):,} ({stage.reason})")
            kept = result.kept
            ledger = ledger.add(result.excluded)

        if len(kept) + len(ledger) != len(records):
            raise RuntimeError(
                f"Row conservation violated: {len(records)} in, {len(kept)} kept, {len(ledger)} excluded"
            )
        return FilterOutcome(kept=kept, ledger=ledger)

    def run(self, records: pd.DataFrame) -> QualificationResult:
        """Filter, normalize, persist and summarize one loaded snapshot."""
        config = self.config
        outcome = self.filter_records(records)

        final = normalize_records(outcome.kept)
        excluded = outcome.ledger.to_frame()
        print(f"[normalize] Final dataset: {len(final):,} articles, {len(final.columns)} columns")
        if final.empty:
            print("[normalize] Every record was excluded; writing an empty dataset.")

        ensure_output_dir(config.output_dir)
        save_final_dataset(final, config.csv_path, config.parquet_path)
        excluded_path = save_ledger(excluded.reset_index(drop=True), config.excluded_path)
        print(f"[save] Artifacts: {config.csv_path}, {config.parquet_path}")
        if excluded_path:
            print(f"[save] Excluded {len(excluded):,} records → {excluded_path}")
        else:
            print("[save] Nothing excluded; no ledger written.")

        summary = summarize_domains(final)
        print(f"[summary] {len(summary):,} domains")
        print(format_summary(summary))

        reset_log(config.log_dir, RUN_SUMMARY_LOG)
        write_jsonl(log_path(config.log_dir, RUN_SUMMARY_LOG), [{
            "input_path": config.input_path,
            "input": len(outcome.kept) + len(outcome.ledger),
            "final": len(final),
            "excluded": len(excluded),
            "reasons": outcome.ledger.reason_counts(),
            "range_start": config.range_start.isoformat(),
            "range_end": config.range_end.isoformat(),
            "target_lang": config.target_lang,
            "missing_date_policy": config.missing_date_policy,
        }])

        return QualificationResult(
            final=final,
            excluded=excluded,
            summary=summary,
            input_count=len(outcome.kept) + len(outcome.ledger),
            paths={
                "csv": config.csv_path,
                "parquet": config.parquet_path,
                "excluded": excluded_path,
            },
        )


def run_qualification(config: PipelineConfig, identifier=None) -> QualificationResult:
    """Load the input snapshot and run the whole pipeline on it.

    Raises:
        MissingInputError: If the input file does not exist
        SchemaViolationError: If required fields are missing or malformed
        ClassificationUnavailableError: If language identification fails
    """
    print(f"[load] Loading records: {config.input_path}")
    records = load_records(config.input_path)
    validate_input_schema(records)
    # Fail on a missing identifier before any output is touched
    pipeline = QualificationPipeline(config, identifier=identifier)

    if config.test_limit is not None:
        original_len = len(records)
        records = records.head(min(config.test_limit, original_len)).copy()
        print(f"[load][TEST] Using {len(records)} of {original_len} records.")
    print(f"[load] {len(records):,} records from {os.path.basename(config.input_path)}")
    return pipeline.run(records)
