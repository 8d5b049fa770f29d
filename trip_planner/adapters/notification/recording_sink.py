"""Recording notification sink for testing.

Keeps every notification in memory so tests can assert on what the
user would have been told.

Example:
    sink = RecordingNotificationSink()
    session = build_session(notifier=sink)
    ...
    assert sink.titles == ["Destination required"]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.models import Notification, Severity


@dataclass
class RecordingNotificationSink:
    """In-memory NotificationSinkPort implementation."""

    notifications: List[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def titles(self) -> List[str]:
        return [n.title for n in self.notifications]

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def destructive(self) -> List[Notification]:
        return [n for n in self.notifications if n.severity is Severity.DESTRUCTIVE]

    def clear(self) -> int:
        count = len(self.notifications)
        self.notifications.clear()
        return count
