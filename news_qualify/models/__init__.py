"""Language identification models."""

from .language_id import LanguageIdentifier, detect_languages

__all__ = [
    "LanguageIdentifier",
    "detect_languages"
]
