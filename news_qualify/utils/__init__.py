"""Utility functions for logging, I/O, and data manipulation."""

from .logging import write_jsonl, reset_log, read_jsonl, ensure_logdir, log_path
from .io_utils import ensure_output_dir, load_records, save_final_dataset, save_ledger
from .data_utils import batched, as_log_value

__all__ = [
    "write_jsonl",
    "reset_log",
    "read_jsonl",
    "ensure_logdir",
    "log_path",
    "ensure_output_dir",
    "load_records",
    "save_final_dataset",
    "save_ledger",
    "batched",
    "as_log_value"
]
