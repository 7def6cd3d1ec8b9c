"""Output writers for configuration validation failures.

Provides writers for exporting failures to CSV and JSON Lines files, for
start-up reports or health checks.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from configuration_validation.results import ConfigurationValidationItem

__all__ = [
    "ValidationReportWriter",
    "CSVReportWriter",
    "JSONLinesReportWriter",
]

FIELDNAMES = ["section", "item", "value", "message"]


@runtime_checkable
class ValidationReportWriter(Protocol):
    """Protocol for writing configuration validation failures."""

    def write_all(self, failures: Iterable[ConfigurationValidationItem]) -> int:
        """Write all failures.

        Args:
            failures: Validation items, e.g. ``collector.result``.

        Returns:
            Number of failures written.
        """
        ...


class CSVReportWriter:
    """Write failures to a CSV file, one row per failure.

    Example:
        writer = CSVReportWriter("configuration_failures.csv")
        count = writer.write_all(config.validate_configuration())

        # Or use context manager for explicit control
        with CSVReportWriter("failures.csv") as writer:
            for failure in failures:
                writer.write_one(failure)
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the CSV writer.

        Args:
            path: Path to the output CSV file.
        """
        self._path = Path(path)
        self._file: TextIO | None = None
        self._writer: csv.DictWriter[str] | None = None
        self._rows_written = 0

    def __enter__(self) -> CSVReportWriter:
        """Open the file and write the header."""
        self._file = open(self._path, "w", newline="", encoding="utf-8")
        self._writer = csv.DictWriter(self._file, fieldnames=FIELDNAMES)
        self._writer.writeheader()
        return self

    def __exit__(self, *args: object) -> None:
        """Close the file."""
        if self._file:
            self._file.close()
            self._file = None
        self._writer = None

    def write_one(self, failure: ConfigurationValidationItem) -> None:
        """Write a single failure.

        Absent values are written as empty cells.
        """
        if self._writer is None:
            raise RuntimeError("Writer not opened. Use 'with' statement or call __enter__")

        row = failure.to_dict()
        if row["value"] is None:
            row["value"] = ""
        self._writer.writerow(row)
        self._rows_written += 1

    def write_all(self, failures: Iterable[ConfigurationValidationItem]) -> int:
        """Write all failures.

        Returns:
            Number of failures written.
        """
        with self:
            for failure in failures:
                self.write_one(failure)
        return self._rows_written


class JSONLinesReportWriter:
    """Write failures to a JSON Lines file.

    Each line is a JSON object with section, item, value and message.
    Values keep their JSON type (string, number, boolean or null).
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._file: TextIO | None = None
        self._rows_written = 0

    def __enter__(self) -> JSONLinesReportWriter:
        """Open the file for writing."""
        self._file = open(self._path, "w", encoding="utf-8")
        return self

    def __exit__(self, *args: object) -> None:
        """Close the file."""
        if self._file:
            self._file.close()
            self._file = None

    def write_one(self, failure: ConfigurationValidationItem) -> None:
        """Write a single failure as a JSON line."""
        if self._file is None:
            raise RuntimeError("Writer not opened. Use 'with' statement or call __enter__")

        line = json.dumps(failure.to_dict(), default=str)
        self._file.write(line + "\n")
        self._rows_written += 1

    def write_all(self, failures: Iterable[ConfigurationValidationItem]) -> int:
        """Write all failures.

        Returns:
            Number of failures written.
        """
        with self:
            for failure in failures:
                self.write_one(failure)
        return self._rows_written
