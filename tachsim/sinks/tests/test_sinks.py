# tachsim/sinks/tests/test_sinks.py

import io
import logging
import tempfile
import unittest
from pathlib import Path

from tachsim.config import SimulationConfig
from tachsim.exceptions import SinkUnavailableError
from tachsim.sinks import (
    ConsoleNotificationSink,
    CsvRowSink,
    LoggingNotificationSink,
    MemoryNotificationSink,
    MemoryRowSink,
)

ROW = {
    'time_step': 60.0,
    'total_seconds': 120,
    'hours': 0,
    'minutes': 2,
    'seconds': 0,
    'rpm': 7321,
    'band': 'Cruise',
    'caution_seconds': 0,
    'redline_seconds': 0
}


class TestCsvRowSink(unittest.TestCase):
    """Test cases for the CSV flight log"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = str(Path(self.tmp.name) / "flight_log.csv")

    def tearDown(self):
        self.tmp.cleanup()

    def read_lines(self):
        return Path(self.path).read_text().splitlines()

    def test_header_written_once(self):
        with CsvRowSink(self.path) as sink:
            sink.write_row(ROW)
            sink.write_row(ROW)

        lines = self.read_lines()
        self.assertEqual(
            lines[0],
            "time_step,total_seconds,hours,minutes,seconds,rpm,band,caution_seconds,redline_seconds"
        )
        self.assertEqual(len(lines), 3)
        self.assertEqual(sink.rows_written, 2)

    def test_row_format(self):
        with CsvRowSink(self.path) as sink:
            sink.write_row(ROW)
        self.assertEqual(self.read_lines()[1], "60.0,120,0,2,0,7321,Cruise,0,0")

    def test_header_matches_config(self):
        sink = CsvRowSink(self.path)
        self.assertEqual(sink.fieldnames, SimulationConfig.CSV_FIELDS)

    def test_unopenable_path(self):
        bad_path = str(Path(self.tmp.name) / "missing" / "flight_log.csv")
        sink = CsvRowSink(bad_path)
        with self.assertRaises(SinkUnavailableError) as ctx:
            sink.open()
        self.assertEqual(ctx.exception.path, bad_path)
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertIn("Failed to open", str(ctx.exception))

    def test_closed_on_error(self):
        sink = CsvRowSink(self.path)
        with self.assertRaises(KeyError):
            with sink:
                sink.write_row(ROW)
                raise KeyError("boom")
        self.assertIsNone(sink._file)
        self.assertEqual(len(self.read_lines()), 2)

    def test_write_before_open(self):
        with self.assertRaises(RuntimeError):
            CsvRowSink(self.path).write_row(ROW)


class TestMemoryRowSink(unittest.TestCase):
    def test_collects_copies(self):
        sink = MemoryRowSink()
        row = dict(ROW)
        with sink:
            self.assertTrue(sink.is_open)
            sink.write_row(row)
        row['rpm'] = 0
        self.assertFalse(sink.is_open)
        self.assertEqual(sink.rows, [ROW])


class TestNotificationSinks(unittest.TestCase):
    def test_console_writes_lines(self):
        stream = io.StringIO()
        sink = ConsoleNotificationSink(stream)
        sink.notify("Idle: Value is within range.")
        sink.notify("Simulation Finished. Check flight_log.csv")
        self.assertEqual(
            stream.getvalue(),
            "Idle: Value is within range.\nSimulation Finished. Check flight_log.csv\n"
        )

    def test_logging_sink(self):
        logger = logging.getLogger("tachsim.test.notifications")
        with self.assertLogs(logger, level="WARNING") as logs:
            LoggingNotificationSink(logger, logging.WARNING).notify("Warning: Engine may overheat.")
        self.assertIn("Warning: Engine may overheat.", logs.output[0])

    def test_memory_sink(self):
        sink = MemoryNotificationSink()
        sink.notify("a")
        sink.notify("b")
        self.assertEqual(sink.messages, ["a", "b"])


if __name__ == '__main__':
    unittest.main()
