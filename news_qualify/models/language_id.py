"""Language identification for article text."""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List

import pandas as pd

from ..config import DEFAULT_DETECTOR_SEED, UNKNOWN_LANGUAGE
from ..errors import ClassificationUnavailableError

# Optional dependency handling
try:
    from langdetect import DetectorFactory, detect
    from langdetect.detector_factory import init_factory
    from langdetect.lang_detect_exception import LangDetectException
    _LANGDETECT_AVAILABLE = True
except Exception:
    _LANGDETECT_AVAILABLE = False


class LanguageIdentifier:
    """Best-guess language code for a text, backed by langdetect.

    ``detect`` returns a code such as ``"de"`` or the sentinel ``"unknown"``
    when the text cannot be classified (missing, empty, no letters).
    """

    def __init__(self, seed: int = DEFAULT_DETECTOR_SEED):
        if not _LANGDETECT_AVAILABLE:
            raise ClassificationUnavailableError("langdetect not installed.")
        DetectorFactory.seed = seed
        try:
            # Load the language profiles up front so worker threads share them
            init_factory()
        except Exception as e:
            raise ClassificationUnavailableError(f"Could not load language profiles: {e}") from e

    def detect(self, text) -> str:
        if text is None or (not isinstance(text, str) and pd.isna(text)):
            return UNKNOWN_LANGUAGE
        text = str(text).strip()
        if not text:
            return UNKNOWN_LANGUAGE
        try:
            return detect(text)
        except LangDetectException:
            return UNKNOWN_LANGUAGE
        except Exception as e:
            raise ClassificationUnavailableError(f"Language detection failed: {e}") from e


def detect_languages(identifier, texts: Iterable, workers: int = 1) -> List[str]:
    """Run the identifier over every text, preserving input order.

    Args:
        identifier: Object with a ``detect(text) -> str`` method
        texts: Texts to classify
        workers: Number of threads to fan calls out over

    Returns:
        One language code (or ``"unknown"``) per text

    Raises:
        ClassificationUnavailableError: If any call fails
    """
    texts = list(texts)
    try:
        if workers <= 1 or len(texts) <= 1:
            return [identifier.detect(t) for t in texts]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(identifier.detect, texts))
    except ClassificationUnavailableError:
        raise
    except Exception as e:
        raise ClassificationUnavailableError(f"Language identifier unavailable: {e}") from e
