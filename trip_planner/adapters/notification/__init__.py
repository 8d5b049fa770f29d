"""Notification adapters - Implementations of NotificationSinkPort.

Available implementations:
- LoggingNotificationSink: Writes notifications to the log
- RecordingNotificationSink: Keeps notifications in memory (testing)
"""

from .logging_sink import LoggingNotificationSink
from .recording_sink import RecordingNotificationSink

__all__ = ["LoggingNotificationSink", "RecordingNotificationSink"]
