"""Shared builders for pipeline tests."""

import pandas as pd

from news_qualify.config import PipelineConfig

DEFAULT_ROW = {
    "domain": "zeitung.de",
    "date_time": "2025-02-01 12:00:00",
    "headline": "Schlagzeile",
    "author": "Redaktion",
    "text": "Das ist ein deutscher Artikel",
    "paywall": False,
}


def make_records(*rows) -> pd.DataFrame:
    """Build a raw record frame; each row overrides DEFAULT_ROW and needs a url."""
    records = []
    for i, row in enumerate(rows):
        rec = dict(DEFAULT_ROW)
        rec["url"] = f"https://zeitung.de/artikel-{i}"
        rec.update(row)
        records.append(rec)
    columns = ["url", "date_time", "domain", "author", "headline", "text", "paywall"]
    df = pd.DataFrame(records)
    return df[columns + [c for c in df.columns if c not in columns]]


def make_config(tmpdir, **overrides) -> PipelineConfig:
    settings = {
        "input_path": f"{tmpdir}/input.parquet",
        "output_dir": f"{tmpdir}/out",
        "log_dir": f"{tmpdir}/logs",
        "range_start": "2025-01-01 00:00:00",
        "range_end": "2025-02-23 23:59:59",
        "target_lang": "de",
    }
    settings.update(overrides)
    return PipelineConfig(**settings)


class FakeIdentifier:
    """Language identifier answering from a text lookup (default German)."""

    def __init__(self, answers=None, default="de"):
        self.answers = answers or {}
        self.default = default
        self.calls = []

    def detect(self, text):
        self.calls.append(text)
        if not isinstance(text, str) or not text.strip():
            return "unknown"
        return self.answers.get(text, self.default)


class BrokenIdentifier:
    """Language identifier whose backing service is unreachable."""

    def detect(self, text):
        raise ConnectionError("language service unreachable")
