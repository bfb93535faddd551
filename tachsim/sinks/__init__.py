"""
sinks - Output collaborators for the simulator

Row sinks receive one dict per tick; notification sinks receive text lines.
"""

from .rows import CsvRowSink, MemoryRowSink
from .notifications import (
    ConsoleNotificationSink,
    LoggingNotificationSink,
    MemoryNotificationSink
)

__all__ = [
    'CsvRowSink',
    'MemoryRowSink',
    'ConsoleNotificationSink',
    'LoggingNotificationSink',
    'MemoryNotificationSink'
]
