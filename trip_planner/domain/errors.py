"""Typed domain errors for the trip planner.

All errors inherit from TripPlannerError and can optionally wrap a root
cause exception for debugging. None of them is fatal: the coordinators
turn each one into a notification and a log record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..services.validation import ValidationRule


@dataclass
class TripPlannerError(Exception):
    """Base error for the trip planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ValidationError(TripPlannerError):
    """The trip preferences violate a submission rule.

    Attributes:
        rule: The first rule that failed
    """

    rule: Optional[ValidationRule] = None


@dataclass
class TransportError(TripPlannerError):
    """The generation request failed.

    Covers network failures, non-success status codes and response
    bodies without an itinerary.

    Attributes:
        status_code: HTTP status code, if a response arrived
        endpoint: URL the request was sent to
    """

    status_code: Optional[int] = None
    endpoint: str = ""


@dataclass
class ExportError(TripPlannerError):
    """The itinerary could not be exported.

    Attributes:
        filename: Name of the document that was being produced
    """

    filename: str = ""


@dataclass
class ConfigurationError(TripPlannerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
