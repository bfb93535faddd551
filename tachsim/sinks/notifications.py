# tachsim/sinks/notifications.py
"""Line-oriented sinks for human-readable notifications."""
import logging
import sys
from typing import List


class ConsoleNotificationSink:
    """Prints each notification on its own line (stdout by default)."""

    def __init__(self, stream=None):
        self.stream = stream

    def notify(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)


class LoggingNotificationSink:
    """Routes notifications through a logger."""

    def __init__(self, logger: logging.Logger = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("tachsim.notifications")
        self.level = level

    def notify(self, message: str) -> None:
        self.logger.log(self.level, message)


class MemoryNotificationSink:
    """Collects notifications in a list."""

    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
