"""Audit log utilities for the qualification pipeline."""

import os
from typing import Iterable, List, Optional

import orjson


def ensure_logdir(path: Optional[str]):
    """Ensure the log directory exists.

    Args:
        path: Directory path to create; ``None`` disables logging
    """
    if path:
        os.makedirs(path, exist_ok=True)


def log_path(log_dir: Optional[str], filename: str) -> Optional[str]:
    """Join a log file name onto the log directory, or None when logging is off."""
    if not log_dir:
        return None
    return os.path.join(log_dir, filename)


def write_jsonl(path: Optional[str], recs: Iterable[dict]):
    """Append records to a JSONL file.

    Args:
        path: Output file path; ``None`` is a no-op
        recs: Iterable of dictionary records
    """
    if not path:
        return
    ensure_logdir(os.path.dirname(path) or ".")
    with open(path, "ab") as f:
        for r in recs:
            f.write(orjson.dumps(r))
            f.write(b"\n")


def reset_log(log_dir: Optional[str], filename: str) -> Optional[str]:
    """Reset (delete) a log file if it exists.

    Args:
        log_dir: Directory holding the log files
        filename: Name of the log file to reset

    Returns:
        Full path to the log file, or None if logging is disabled
    """
    path = log_path(log_dir, filename)
    if path and os.path.exists(path):
        os.remove(path)
    return path


def read_jsonl(path: str) -> List[dict]:
    """Read JSONL file and return list of dicts.

    Args:
        path: Path to JSONL file

    Returns:
        List of dictionary records
    """
    if not os.path.exists(path):
        return []
    records = []
    with open(path, "rb") as f:
        for line in f:
            if line.strip():
                records.append(orjson.loads(line))
    return records
