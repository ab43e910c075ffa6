#!/usr/bin/env python3
"""
Qualify a scraped news snapshot with auditable, staged filtering.

Stages:
  duplicate → date_range → language → normalize

Logs (default ./logs):
  01_duplicate.jsonl    # one line per duplicate URL dropped
  02_date_range.jsonl   # one line per record outside the date window
  03_language.jsonl     # one line per record not in the target language
  04_run_summary.jsonl  # counts per run

Final artifacts (default ./data):
  huggingface_news_dataset.csv
  huggingface_news_dataset.parquet
  excluded_articles.parquet   # only when something was excluded
"""

from news_qualify.cli import main

if __name__ == "__main__":
    main()
