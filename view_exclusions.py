#!/usr/bin/env python3
"""
Quick utility to view excluded articles from the exclusion ledger.
Usage:
  python view_exclusions.py [ledger_path] [--reason REASON] [--limit N]
  python view_exclusions.py --logs LOG_DIR [--reason REASON]

Reasons: duplicate, out_of_date_range, non_german (or non_<language>)
"""

import os
import sys
from collections import Counter

import pandas as pd

from news_qualify.config import (
    DEFAULT_OUTPUT_DIR, EXCLUDED_FILENAME, DUPLICATE_LOG, DATE_RANGE_LOG, LANGUAGE_LOG
)
from news_qualify.utils.logging import read_jsonl


def _flag_value(argv, flag: str):
    if flag in argv:
        idx = argv.index(flag)
        if idx + 1 < len(argv):
            return argv[idx + 1]
    return None


def view_ledger(path: str, filter_reason=None, limit: int = 20) -> bool:
    """Print reason counts and a sample of excluded articles."""
    if not os.path.exists(path):
        print(f"❌ {path} not found.")
        print("Either nothing was excluded in the last run, or run: python qualify_news.py")
        return False

    ledger = pd.read_parquet(path)
    reasons = Counter(ledger["exclusion_reason"])

    print(f"\n{'='*60}")
    print(f"📊 EXCLUSION LEDGER: {path}")
    print(f"{'='*60}")
    print(f"Total excluded: {len(ledger):,}")
    print(f"\n📋 Exclusion Reasons:")
    for reason, count in reasons.most_common():
        marker = " ← viewing" if reason == filter_reason else ""
        print(f"  • {reason}: {count} ({count/len(ledger)*100:.1f}%){marker}")

    rows = ledger
    if filter_reason:
        rows = ledger[ledger["exclusion_reason"] == filter_reason]

    print(f"\n{'='*60}")
    print(f"Showing {min(limit, len(rows))} of {len(rows)} excluded articles")
    print(f"{'='*60}\n")

    for i, (_, r) in enumerate(rows.head(limit).iterrows(), 1):
        headline = str(r.get("headline") or "(no headline)")[:80]
        print(f"{i}. [{r['exclusion_reason']}] {headline}")
        print(f"   Domain: {r.get('domain')}  Date: {r.get('date_time')}")
        print(f"   URL: {r.get('url')}")
        detected = r.get("detected_language")
        if isinstance(detected, str):
            print(f"   Detected language: {detected}")
        print()

    if rows.empty:
        print("No excluded articles found.")
    return True


def view_stage_logs(log_dir: str, filter_reason=None) -> bool:
    """Print per-stage exclusion counts from the JSONL audit logs."""
    found = False
    print(f"\n{'='*60}")
    print(f"📜 STAGE AUDIT LOGS: {log_dir}")
    print(f"{'='*60}")
    for filename in (DUPLICATE_LOG, DATE_RANGE_LOG, LANGUAGE_LOG):
        path = os.path.join(log_dir, filename)
        if not os.path.exists(path):
            print(f"  • {filename}: no log")
            continue
        found = True
        entries = read_jsonl(path)
        if filter_reason:
            entries = [e for e in entries if e.get("reason") == filter_reason]
        detected = Counter(e["detected_language"] for e in entries if e.get("detected_language"))
        extra = f" (detected: {dict(detected.most_common())})" if detected else ""
        print(f"  • {filename}: {len(entries)} excluded{extra}")
    return found


def print_usage():
    print("\n💡 Usage: python view_exclusions.py [ledger_path] [--reason REASON] [--limit N] [--logs LOG_DIR]")
    print("   Example: python view_exclusions.py data/excluded_articles.parquet --reason duplicate")
    print("   Example: python view_exclusions.py --logs logs")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = os.path.join(DEFAULT_OUTPUT_DIR, EXCLUDED_FILENAME)
    if argv and not argv[0].startswith("--"):
        path = argv[0]
    try:
        limit = int(_flag_value(argv, "--limit") or 20)
    except ValueError:
        print(f"❌ --limit must be an integer, got {_flag_value(argv, '--limit')!r}")
        print_usage()
        return False

    filter_reason = _flag_value(argv, "--reason")
    log_dir = _flag_value(argv, "--logs")
    if log_dir:
        success = view_stage_logs(log_dir, filter_reason)
    else:
        success = view_ledger(path, filter_reason, limit)
    if not success:
        print_usage()
    return success


if __name__ == "__main__":
    main()
