import os
import unittest

import pandas as pd

from news_qualify.cli import create_argument_parser, main, process_arguments
from news_qualify.config import PipelineConfig, non_language_reason, to_utc_timestamp


class TestPipelineConfig(unittest.TestCase):
    def test_defaults(self):
        config = PipelineConfig()
        self.assertEqual(config.range_start, pd.Timestamp("2025-01-01 00:00:00", tz="UTC"))
        self.assertEqual(config.range_end, pd.Timestamp("2025-02-23 23:59:59", tz="UTC"))
        self.assertEqual(config.target_lang, "de")
        self.assertEqual(config.exclusion_reason, "non_german")
        self.assertEqual(config.missing_date_policy, "exclude")

    def test_output_paths(self):
        config = PipelineConfig(output_dir="out", out_prefix="news")
        self.assertEqual(config.csv_path, os.path.join("out", "news.csv"))
        self.assertEqual(config.parquet_path, os.path.join("out", "news.parquet"))
        self.assertEqual(config.excluded_path, os.path.join("out", "excluded_articles.parquet"))

    def test_bounds_are_normalized_to_utc(self):
        config = PipelineConfig(range_start="2025-01-01T01:00:00+01:00", range_end="2025-01-31")
        self.assertEqual(config.range_start, pd.Timestamp("2025-01-01 00:00:00", tz="UTC"))
        self.assertEqual(str(config.range_end.tz), "UTC")

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            PipelineConfig(range_start="2025-03-01", range_end="2025-01-01")
        with self.assertRaises(ValueError):
            PipelineConfig(missing_date_policy="guess")
        with self.assertRaises(ValueError):
            PipelineConfig(detector_workers=0)
        with self.assertRaises(ValueError):
            PipelineConfig(target_lang="  ")

    def test_helpers(self):
        self.assertEqual(non_language_reason("DE"), "non_german")
        self.assertEqual(non_language_reason("xx"), "non_xx")
        self.assertEqual(to_utc_timestamp("2025-01-01").tzinfo is not None, True)


class TestCli(unittest.TestCase):
    def test_arguments_build_config(self):
        parser = create_argument_parser()
        args = parser.parse_args([
            "--input", "raw.csv",
            "--output_dir", "out",
            "--range_start", "2025-01-10",
            "--range_end", "2025-01-20 12:00:00",
            "--target_lang", "en",
            "--missing_dates", "keep",
            "--detector_workers", "3",
            "--test-limit", "10",
        ])
        config = process_arguments(args)

        self.assertEqual(config.input_path, os.path.abspath("raw.csv"))
        self.assertEqual(config.output_dir, os.path.abspath("out"))
        self.assertEqual(config.range_start, pd.Timestamp("2025-01-10", tz="UTC"))
        self.assertEqual(config.target_lang, "en")
        self.assertEqual(config.exclusion_reason, "non_english")
        self.assertEqual(config.missing_date_policy, "keep")
        self.assertEqual(config.detector_workers, 3)
        self.assertEqual(config.test_limit, 10)

    def test_invalid_range_exits(self):
        with self.assertRaises(SystemExit):
            main(["--range_start", "2025-03-01", "--range_end", "2025-01-01"])

    def test_unknown_policy_exits(self):
        with self.assertRaises(SystemExit):
            create_argument_parser().parse_args(["--missing_dates", "maybe"])


if __name__ == "__main__":
    unittest.main()
