"""I/O utility functions: loading the raw snapshot and persisting outputs."""

import os
from typing import Optional

import pandas as pd

from ..errors import MissingInputError, SchemaViolationError


def ensure_output_dir(path: str):
    """Ensure an output directory exists.

    Args:
        path: Directory path to create
    """
    os.makedirs(path, exist_ok=True)


def load_records(path: str) -> pd.DataFrame:
    """Load a record collection, choosing the reader by file suffix.

    Args:
        path: Path to a .parquet, .csv, .jsonl/.json or .pkl/.pickle file

    Returns:
        DataFrame with one row per record, in file order

    Raises:
        MissingInputError: If the file does not exist
        SchemaViolationError: If the suffix is not a supported format
    """
    if not os.path.exists(path):
        raise MissingInputError(f"Input file not found at {path}. Please check the path.")

    suffix = os.path.splitext(path)[1].lower()
    if suffix == ".parquet":
        df = pd.read_parquet(path)
    elif suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix in (".jsonl", ".json"):
        df = pd.read_json(path, lines=True)
    elif suffix in (".pkl", ".pickle"):
        df = pd.read_pickle(path)
    else:
        raise SchemaViolationError(f"Unsupported input format '{suffix}' for {path}")
    return df.reset_index(drop=True)


def save_final_dataset(df: pd.DataFrame, csv_path: str, parquet_path: str):
    """Write the published dataset as CSV (missing values as empty fields) and parquet."""
    ensure_output_dir(os.path.dirname(csv_path) or ".")
    ensure_output_dir(os.path.dirname(parquet_path) or ".")
    df.to_csv(csv_path, index=False, na_rep="")
    df.to_parquet(parquet_path, index=False)


def save_ledger(ledger: pd.DataFrame, path: str) -> Optional[str]:
    """Write the exclusion ledger, or remove a stale one when nothing was excluded.

    Returns:
        The path written, or None if the ledger was empty
    """
    if ledger.empty:
        if os.path.exists(path):
            os.remove(path)
        return None
    ensure_output_dir(os.path.dirname(path) or ".")
    ledger.to_parquet(path, index=False)
    return path
