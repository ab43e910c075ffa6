import unittest

from news_qualify.stages import SUMMARY_COLUMNS, format_summary, normalize_records, summarize_domains
from tests.helpers import make_records


class TestSummarizeDomains(unittest.TestCase):
    def test_counts_and_percentages(self):
        final = normalize_records(make_records(
            {"domain": "b.de", "paywall": True},
            {"domain": "a.de", "paywall": False},
            {"domain": "b.de", "paywall": False},
            {"domain": "b.de", "paywall": False},
            {"domain": "a.de", "paywall": False},
        ))
        summary = summarize_domains(final)

        self.assertEqual(list(summary.columns), SUMMARY_COLUMNS)
        self.assertEqual(summary["Domain"].tolist(), ["b.de", "a.de"])
        self.assertEqual(summary["Total number of articles"].tolist(), [3, 2])
        self.assertEqual(summary["Number of paywalled articles"].tolist(), [1, 0])
        self.assertEqual(summary["Does the domain have any paywalled contents?"].tolist(), ["Yes", "No"])
        self.assertEqual(
            summary["percentage of complete articles without paywalls"].tolist(),
            ["66.67%", "100.00%"],
        )

    def test_fully_paywalled_domain(self):
        final = normalize_records(make_records({"paywall": True}, {"paywall": True}))
        row = summarize_domains(final).iloc[0]
        self.assertEqual(row["percentage of complete articles without paywalls"], "0.00%")

    def test_no_zero_article_rows(self):
        final = normalize_records(make_records({"domain": "a.de"}, {"domain": "b.de"}))
        summary = summarize_domains(final)
        self.assertTrue((summary["Total number of articles"] >= 1).all())

    def test_empty_dataset(self):
        summary = summarize_domains(normalize_records(make_records({}).iloc[0:0]))
        self.assertTrue(summary.empty)
        self.assertEqual(list(summary.columns), SUMMARY_COLUMNS)
        self.assertIn("no articles", format_summary(summary))

    def test_format_summary_lists_domains(self):
        final = normalize_records(make_records({"domain": "a.de"}))
        text = format_summary(summarize_domains(final))
        self.assertIn("a.de", text)
        self.assertIn("100.00%", text)


if __name__ == "__main__":
    unittest.main()
