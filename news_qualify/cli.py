"""Command-line interface for the news-qualify pipeline."""

import os
import argparse

from .config import (
    DEFAULT_INPUT, DEFAULT_OUTPUT_DIR, OUT_PREFIX, LOG_DIR,
    DEFAULT_RANGE_START, DEFAULT_RANGE_END, DEFAULT_TARGET_LANG,
    MISSING_DATE_POLICIES, DEFAULT_MISSING_DATE_POLICY,
    DEFAULT_DETECTOR_WORKERS, DEFAULT_DETECTOR_SEED, PipelineConfig
)
from .pipeline import run_qualification


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    ap = argparse.ArgumentParser("Qualify a scraped news-article snapshot for publication.")

    # Data and output configuration
    ap.add_argument("--input", default=DEFAULT_INPUT,
                    help="Raw record collection (.parquet, .csv, .jsonl, .pkl)")
    ap.add_argument("--output_dir", default=DEFAULT_OUTPUT_DIR,
                    help="Output directory for the dataset and exclusion ledger (created if absent)")
    ap.add_argument("--out_prefix", default=OUT_PREFIX,
                    help="Prefix for the final dataset files")
    ap.add_argument("--log_dir", default=LOG_DIR,
                    help="Directory for audit log files")
    ap.add_argument("--test-limit", type=int, default=None,
                    help="Limit processing to the first N records for testing")

    # Date range configuration
    ap.add_argument("--range_start", default=DEFAULT_RANGE_START,
                    help="Inclusive lower bound for date_time (UTC)")
    ap.add_argument("--range_end", default=DEFAULT_RANGE_END,
                    help="Inclusive upper bound for date_time (UTC)")
    ap.add_argument("--missing_dates", default=DEFAULT_MISSING_DATE_POLICY, choices=list(MISSING_DATE_POLICIES),
                    help="Handling of records with missing or unparseable date_time")

    # Language configuration
    ap.add_argument("--target_lang", default=DEFAULT_TARGET_LANG,
                    help="Language code articles must be detected as")
    ap.add_argument("--detector_workers", type=int, default=DEFAULT_DETECTOR_WORKERS,
                    help="Threads used for language detection")
    ap.add_argument("--detector_seed", type=int, default=DEFAULT_DETECTOR_SEED,
                    help="Seed for the language detector (keeps runs reproducible)")

    return ap


def process_arguments(args) -> PipelineConfig:
    """Process and validate command-line arguments.

    Args:
        args: Parsed argument namespace

    Returns:
        Run configuration built from the arguments
    """
    # Convert paths to absolute
    args.input = os.path.abspath(args.input)
    args.output_dir = os.path.abspath(args.output_dir)
    if args.log_dir:
        args.log_dir = os.path.abspath(args.log_dir)
    return PipelineConfig.from_args(args)


def main(argv=None):
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    try:
        config = process_arguments(args)
    except ValueError as e:
        parser.error(str(e))
    run_qualification(config)
