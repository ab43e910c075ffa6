"""Configuration constants and settings for the news-qualify pipeline."""

import os
from dataclasses import dataclass
from typing import Optional

import pandas as pd

# Input and output configuration
DEFAULT_INPUT = os.path.join("data", "final_data.parquet")
DEFAULT_OUTPUT_DIR = "data"
OUT_PREFIX = "huggingface_news_dataset"
EXCLUDED_FILENAME = "excluded_articles.parquet"
LOG_DIR = "logs"

# Date range (inclusive, UTC)
DEFAULT_RANGE_START = "2025-01-01 00:00:00"
DEFAULT_RANGE_END = "2025-02-23 23:59:59"

# What to do with records whose date_time is missing or unparseable
MISSING_DATE_POLICIES = ("exclude", "keep", "fail")
DEFAULT_MISSING_DATE_POLICY = "exclude"

# Language identification
DEFAULT_TARGET_LANG = "de"
DEFAULT_DETECTOR_WORKERS = 1
DEFAULT_DETECTOR_SEED = 0
UNKNOWN_LANGUAGE = "unknown"

# Names used to build the non_<language> exclusion reason
LANGUAGE_NAMES = {
    "de": "german",
    "en": "english",
    "fr": "french",
    "es": "spanish",
    "it": "italian",
    "nl": "dutch",
    "pl": "polish",
    "pt": "portuguese",
}

# Exclusion reasons
REASON_DUPLICATE = "duplicate"
REASON_OUT_OF_RANGE = "out_of_date_range"

# Audit log file names
DUPLICATE_LOG = "01_duplicate.jsonl"
DATE_RANGE_LOG = "02_date_range.jsonl"
LANGUAGE_LOG = "03_language.jsonl"
RUN_SUMMARY_LOG = "04_run_summary.jsonl"


def non_language_reason(target_lang: str) -> str:
    """Build the exclusion reason for records not in ``target_lang``.

    Args:
        target_lang: ISO-like language code, e.g. ``"de"``

    Returns:
        Reason label such as ``"non_german"``
    """
    code = target_lang.lower()
    return f"non_{LANGUAGE_NAMES.get(code, code)}"


def to_utc_timestamp(value) -> pd.Timestamp:
    """Parse a bound into a UTC timestamp.

    Naive values are taken to be UTC already; aware values are converted.
    """
    ts = pd.Timestamp(value)
    if ts is pd.NaT:
        raise ValueError(f"Invalid timestamp: {value!r}")
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


@dataclass(frozen=True)
class PipelineConfig:
    """Settings for one qualification run."""

    input_path: str = DEFAULT_INPUT
    output_dir: str = DEFAULT_OUTPUT_DIR
    range_start: pd.Timestamp = to_utc_timestamp(DEFAULT_RANGE_START)
    range_end: pd.Timestamp = to_utc_timestamp(DEFAULT_RANGE_END)
    target_lang: str = DEFAULT_TARGET_LANG
    missing_date_policy: str = DEFAULT_MISSING_DATE_POLICY
    log_dir: Optional[str] = LOG_DIR
    out_prefix: str = OUT_PREFIX
    detector_workers: int = DEFAULT_DETECTOR_WORKERS
    detector_seed: int = DEFAULT_DETECTOR_SEED
    test_limit: Optional[int] = None

    def __post_init__(self):
        # Frozen, so normalized values go through object.__setattr__
        object.__setattr__(self, "range_start", to_utc_timestamp(self.range_start))
        object.__setattr__(self, "range_end", to_utc_timestamp(self.range_end))
        object.__setattr__(self, "target_lang", self.target_lang.strip().lower())
        if self.range_start > self.range_end:
            raise ValueError(
                f"range_start {self.range_start} is after range_end {self.range_end}"
            )
        if self.missing_date_policy not in MISSING_DATE_POLICIES:
            raise ValueError(
                f"Unsupported missing_date_policy '{self.missing_date_policy}'. "
                f"Allowed values: {list(MISSING_DATE_POLICIES)}"
            )
        if not self.target_lang:
            raise ValueError("target_lang must not be empty")
        if self.detector_workers < 1:
            raise ValueError("detector_workers must be at least 1")
        if self.test_limit is not None and self.test_limit < 0:
            raise ValueError("test_limit must not be negative")

    @classmethod
    def from_args(cls, args) -> "PipelineConfig":
        """Build a config from a parsed CLI namespace."""
        return cls(
            input_path=args.input,
            output_dir=args.output_dir,
            range_start=args.range_start,
            range_end=args.range_end,
            target_lang=args.target_lang,
            missing_date_policy=args.missing_dates,
            log_dir=args.log_dir,
            out_prefix=args.out_prefix,
            detector_workers=args.detector_workers,
            detector_seed=args.detector_seed,
            test_limit=args.test_limit,
        )

    @property
    def exclusion_reason(self) -> str:
        return non_language_reason(self.target_lang)

    @property
    def csv_path(self) -> str:
        return os.path.join(self.output_dir, f"{self.out_prefix}.csv")

    @property
    def parquet_path(self) -> str:
        return os.path.join(self.output_dir, f"{self.out_prefix}.parquet")

    @property
    def excluded_path(self) -> str:
        return os.path.join(self.output_dir, EXCLUDED_FILENAME)
