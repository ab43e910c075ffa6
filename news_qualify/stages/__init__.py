"""Processing stages for the news-qualify pipeline."""

from .base import FilterStage, StageResult, REASON_COLUMN
from .duplicate_stage import DuplicateUrlStage
from .date_range_stage import DateRangeStage, parse_date_times
from .language_stage import LanguageStage, DETECTED_LANGUAGE_COLUMN
from .finalize_stage import normalize_records
from .analysis import summarize_domains, format_summary, SUMMARY_COLUMNS

__all__ = [
    "FilterStage",
    "StageResult",
    "REASON_COLUMN",
    "DuplicateUrlStage",
    "DateRangeStage",
    "parse_date_times",
    "LanguageStage",
    "DETECTED_LANGUAGE_COLUMN",
    "normalize_records",
    "summarize_domains",
    "format_summary",
    "SUMMARY_COLUMNS"
]
