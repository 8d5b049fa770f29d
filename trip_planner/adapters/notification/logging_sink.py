"""Notification sink that writes to the log."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import Notification, Severity


@dataclass
class LoggingNotificationSink:
    """Logs each notification; destructive ones at WARNING level.

    This adapter implements NotificationSinkPort for headless runs,
    where there is no toast area to present notifications in.
    """

    name: str = "notifications"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"trip_planner.{self.name}")

    def notify(self, notification: Notification) -> None:
        level = (
            logging.WARNING
            if notification.severity is Severity.DESTRUCTIVE
            else logging.INFO
        )
        self._logger.log(
            level,
            notification.title,
            extra={"description": notification.description},
        )
