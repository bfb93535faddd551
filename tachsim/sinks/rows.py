# tachsim/sinks/rows.py
"""Row sinks for the per-tick flight log."""
import csv
import logging
from typing import Any, Dict, List, Optional

from ..config import SimulationConfig
from ..exceptions import SinkUnavailableError

logger = logging.getLogger(__name__)


class CsvRowSink:
    """
    Writes flight log rows to a CSV file.

    The header is written once when the file is opened. Use as a context
    manager so the file is flushed and closed on every exit path.
    """

    def __init__(self, path: str = SimulationConfig.LOG_PATH,
                 fieldnames: Optional[List[str]] = None):
        self.path = path
        self.fieldnames = fieldnames or list(SimulationConfig.CSV_FIELDS)
        self._file = None
        self._writer = None
        self.rows_written = 0

    def open(self) -> "CsvRowSink":
        try:
            self._file = open(self.path, 'w', newline='')
        except OSError as e:
            raise SinkUnavailableError(self.path) from e

        self._writer = csv.DictWriter(self._file, fieldnames=self.fieldnames)
        self._writer.writeheader()
        logger.info(f"Flight log opened at {self.path}")
        return self

    def write_row(self, row: Dict[str, Any]) -> None:
        if self._writer is None:
            raise RuntimeError("Sink not open. Call open() first.")
        self._writer.writerow(row)
        self.rows_written += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            logger.info(f"Flight log closed ({self.rows_written} rows)")
        self._file = None
        self._writer = None

    def __enter__(self) -> "CsvRowSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemoryRowSink:
    """Keeps rows in a list; for tests and embedding."""

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []
        self.is_open = False

    def open(self) -> "MemoryRowSink":
        self.is_open = True
        return self

    def write_row(self, row: Dict[str, Any]) -> None:
        self.rows.append(dict(row))

    def close(self) -> None:
        self.is_open = False

    def __enter__(self) -> "MemoryRowSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
