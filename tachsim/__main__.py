#!/usr/bin/env python3
# tachsim/__main__.py
"""
Jet engine tachometer simulator: 50-hour endurance run written to flight_log.csv
"""
import logging
import sys

from .config import SimulationConfig
from .core import SimulationDriver
from .exceptions import SinkUnavailableError
from .sinks import ConsoleNotificationSink, CsvRowSink

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format=SimulationConfig.LOG_FORMAT)

    driver = SimulationDriver(
        row_sink=CsvRowSink(SimulationConfig.LOG_PATH),
        notifier=ConsoleNotificationSink()
    )
    try:
        driver.run()
    except SinkUnavailableError as e:
        logger.error(f"Flight log unavailable: {e.__cause__}")
        print(f"Failed to open {e.path}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
