#!/usr/bin/env python3
"""
Bank Record Loader

Loads a persisted bank snapshot (one CSV file per collection) into BankRecords.

Files, for a given suffix (e.g. "" for production, "_prod" for the obfuscated copy):
- owners{suffix}.csv
- savings{suffix}.csv
- checking{suffix}.csv
- register{suffix}.csv

A row that fails to parse aborts the whole load; rows are never skipped.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import pandas as pd

from .models import BankRecords, CheckingAccount, Owner, RegisterEntry, SavingsAccount

logger = logging.getLogger(__name__)

T = TypeVar("T")

RECORD_FILE_NAMES = ("owners", "savings", "checking", "register")


class RecordLoadError(ValueError):
    """Raised when a persisted record file or row cannot be parsed."""

    def __init__(self, message: str, path: Path, row_number: int | None = None):
        super().__init__(message)
        self.path = path
        self.row_number = row_number


def record_file_path(data_dir: Path, name: str, suffix: str = "") -> Path:
    """Path of one collection's CSV file."""
    return data_dir / f"{name}{suffix}.csv"


def read_csv_rows(path: Path) -> list[dict[str, str]]:
    """
    Read a CSV file as a list of string-valued row dicts.

    Every column is read as text and empty cells stay empty strings, so ids,
    SSNs and zip codes keep their exact spelling.

    Raises:
        FileNotFoundError: If the file doesn't exist
        RecordLoadError: If the file is not valid CSV
    """
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning("Record file %s is empty", path)
        return []
    except pd.errors.ParserError as e:
        raise RecordLoadError(f"Failed to parse {path}: {e}", path) from e

    return df.to_dict(orient="records")


def parse_rows(path: Path, factory: Callable[[dict[str, str]], T]) -> list[T]:
    """
    Convert every row of a CSV file with factory.

    Raises:
        RecordLoadError: On the first row factory rejects, with its line number
    """
    records: list[T] = []
    # Line 1 is the header
    for row_number, row in enumerate(read_csv_rows(path), start=2):
        try:
            records.append(factory(row))
        except (KeyError, ValueError, TypeError) as e:
            raise RecordLoadError(f"Invalid record at {path}:{row_number}: {e!r}", path, row_number) from e
    return records


def load_records(data_dir: str | Path, suffix: str = "") -> BankRecords:
    """
    Load a bank snapshot from CSV files.

    Args:
        data_dir: Directory holding the four record files
        suffix: File name suffix, e.g. "_prod"

    Returns:
        BankRecords with accounts ordered savings first, then checking

    Raises:
        FileNotFoundError: If the directory or any record file is missing
        RecordLoadError: If any row is invalid
        CheckNumberFormatError: If a legacy checking row has unusable details text

    Example:
        >>> records = load_records("data/prod")
        >>> print(records.counts())
        3 owners, 4 accounts, 9 registers
    """
    data_dir = Path(data_dir)
    if not data_dir.exists():
        raise FileNotFoundError(f"Record directory not found: {data_dir}")

    owners = parse_rows(record_file_path(data_dir, "owners", suffix), Owner.from_csv_row)
    savings = parse_rows(record_file_path(data_dir, "savings", suffix), SavingsAccount.from_csv_row)
    checking = parse_rows(record_file_path(data_dir, "checking", suffix), CheckingAccount.from_csv_row)
    entries = parse_rows(record_file_path(data_dir, "register", suffix), RegisterEntry.from_csv_row)

    records = BankRecords(owners=owners, accounts=[*savings, *checking], register_entries=entries)
    logger.info("Loaded %s from %s", records.counts(), data_dir)
    return records
