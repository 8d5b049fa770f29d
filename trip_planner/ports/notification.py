"""Notification port - Fire-and-forget user feedback."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Notification


class NotificationSinkPort(Protocol):
    """Port for presenting notifications to the user.

    Implementations:
    - adapters/notification/logging_sink.py (LoggingNotificationSink)
    - adapters/notification/recording_sink.py (RecordingNotificationSink) - Testing

    Core logic never reads anything back from the sink.
    """

    def notify(self, notification: Notification) -> None:
        """Present a notification.

        Args:
            notification: Title, description and severity to show.
        """
        ...
