import unittest

from news_qualify.errors import ClassificationUnavailableError
from news_qualify.models import LanguageIdentifier, detect_languages
from tests.helpers import BrokenIdentifier, FakeIdentifier

GERMAN = (
    "Die Bundesregierung hat am Mittwoch neue Maßnahmen zur Entlastung der Bürger "
    "beschlossen, die ab dem kommenden Monat gelten sollen."
)
ENGLISH = (
    "The government announced on Wednesday a new package of measures intended to "
    "support households through the coming winter months."
)


class TestLanguageIdentifier(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.identifier = LanguageIdentifier(seed=0)

    def test_detects_clear_text(self):
        self.assertEqual(self.identifier.detect(GERMAN), "de")
        self.assertEqual(self.identifier.detect(ENGLISH), "en")

    def test_refuses_unclassifiable_text(self):
        self.assertEqual(self.identifier.detect(None), "unknown")
        self.assertEqual(self.identifier.detect(float("nan")), "unknown")
        self.assertEqual(self.identifier.detect("   "), "unknown")
        self.assertEqual(self.identifier.detect("12345 !!! 678"), "unknown")

    def test_seeded_detection_is_repeatable(self):
        first = [self.identifier.detect(t) for t in (GERMAN, ENGLISH)]
        second = [self.identifier.detect(t) for t in (GERMAN, ENGLISH)]
        self.assertEqual(first, second)


class TestDetectLanguages(unittest.TestCase):
    def test_preserves_order_with_threads(self):
        texts = [f"t{i}" for i in range(20)]
        answers = {t: "en" for t in texts[::2]}
        serial = detect_languages(FakeIdentifier(answers), texts, workers=1)
        threaded = detect_languages(FakeIdentifier(answers), texts, workers=5)
        self.assertEqual(serial, threaded)
        self.assertEqual(serial[:2], ["en", "de"])

    def test_wraps_identifier_errors(self):
        with self.assertRaises(ClassificationUnavailableError):
            detect_languages(BrokenIdentifier(), ["a", "b"], workers=2)

    def test_empty_input(self):
        self.assertEqual(detect_languages(FakeIdentifier(), [], workers=3), [])


if __name__ == "__main__":
    unittest.main()
