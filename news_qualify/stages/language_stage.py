"""Language stage - keep only articles written in the target language."""

from typing import List

import pandas as pd

from ..config import DEFAULT_DETECTOR_WORKERS, LANGUAGE_LOG, UNKNOWN_LANGUAGE, non_language_reason
from ..models.language_id import detect_languages
from ..utils.data_utils import batched
from .base import FilterStage, StageResult

DETECTED_LANGUAGE_COLUMN = "detected_language"
PROGRESS_BATCH = 1000


class LanguageStage(FilterStage):
    """Exclude records whose text is not identified as ``target_lang``.

    Refusals (``"unknown"``) are excluded too; the excluded rows carry
    the detector's answer in ``detected_language``. One identifier call
    per record, so this stage runs after the cheap ones.
    """

    name = "language"
    log_filename = LANGUAGE_LOG

    def __init__(self, identifier, target_lang: str, workers: int = DEFAULT_DETECTOR_WORKERS):
        self.identifier = identifier
        self.target_lang = target_lang.lower()
        self.reason = non_language_reason(self.target_lang)
        self.workers = workers

    def detect(self, records: pd.DataFrame) -> pd.Series:
        """Identify the language of every record's text, in row order."""
        texts = records["text"].tolist()
        detected: List[str] = []
        total = len(texts)
        if total:
            print(f"[language] Detecting language of {total:,} articles (workers={self.workers})...")
        for chunk in batched(texts, PROGRESS_BATCH):
            detected.extend(detect_languages(self.identifier, chunk, self.workers))
            if total > PROGRESS_BATCH:
                print(f"[language]   {len(detected):,}/{total:,}")
        return pd.Series(detected, index=records.index, dtype=object)

    def apply(self, records: pd.DataFrame) -> StageResult:
        detected = self.detect(records)
        mask = detected != self.target_lang
        undetermined = int((detected == UNKNOWN_LANGUAGE).sum())
        if undetermined:
            print(f"[language] {undetermined:,} articles could not be classified")
        return self.partition(records, mask, annotations={DETECTED_LANGUAGE_COLUMN: detected})

    def log_fields(self, row):
        return {"detected_language": row.get(DETECTED_LANGUAGE_COLUMN)}
