"""Submission rules for trip preferences.

The Validator checks a TripPreferences record against a fixed, ordered
list of rules and stops at the first one that fails, so the user only
ever sees one problem per submission attempt.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Optional

from ..domain.errors import ValidationError
from ..domain.models import Notification, Severity, TripPreferences

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class ValidationRule(Enum):
    """Submission rules in evaluation order.

    Each member carries the title and description shown to the user
    when the rule is violated.
    """

    DESTINATION_REQUIRED = (
        "Destination required",
        "Please add at least one destination city.",
    )
    DATES_REQUIRED = (
        "Dates required",
        "Please select both start and end dates.",
    )
    START_DATE_IN_PAST = (
        "Invalid start date",
        "Start date cannot be in the past.",
    )
    END_DATE_NOT_AFTER_START = (
        "Invalid end date",
        "End date must be after start date.",
    )
    BUDGET_REQUIRED = (
        "Budget required",
        "Please enter a valid budget amount.",
    )
    TRAVEL_STYLE_REQUIRED = (
        "Travel style required",
        "Please select your travel style.",
    )
    INTERESTS_REQUIRED = (
        "Interests required",
        "Please select at least one interest.",
    )
    TRAVEL_MODE_REQUIRED = (
        "Travel mode required",
        "Please select your preferred mode of travel.",
    )

    def __init__(self, title: str, description: str) -> None:
        self.title = title
        self.description = description

    @property
    def notification(self) -> Notification:
        return Notification(self.title, self.description, Severity.DESTRUCTIVE)


def parse_budget(text: str) -> Optional[int]:
    """Parse the leading integer of a budget string.

    Trailing characters are ignored, so "12.5" parses as 12.

    Returns:
        The parsed amount, or None if the text does not start with an
        integer.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_iso_date(text: str) -> Optional[date]:
    """Parse an ISO date string, returning None if it is malformed."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating trip preferences.

    Attributes:
        rule: The first violated rule, or None when everything passed
    """

    rule: Optional[ValidationRule] = None

    @property
    def is_valid(self) -> bool:
        return self.rule is None


@dataclass(frozen=True)
class Validator:
    """Ordered rule evaluation over TripPreferences.

    Attributes:
        today: Returns the current date; start dates before it are
            rejected. Injected so tests can pin the calendar.
    """

    today: Callable[[], date] = date.today

    def validate(self, preferences: TripPreferences) -> ValidationResult:
        """Return the first violated rule, if any.

        Args:
            preferences: The record to check.

        Returns:
            ValidationResult naming at most one rule.
        """
        return ValidationResult(self._first_violation(preferences))

    def ensure_valid(self, preferences: TripPreferences) -> None:
        """Validate and raise on the first violation.

        Raises:
            ValidationError: If any rule is violated.
        """
        rule = self._first_violation(preferences)
        if rule is not None:
            raise ValidationError(rule.description, rule=rule)

    def _first_violation(
        self, preferences: TripPreferences
    ) -> Optional[ValidationRule]:
        if not preferences.destination:
            return ValidationRule.DESTINATION_REQUIRED

        if not preferences.start_date or not preferences.end_date:
            return ValidationRule.DATES_REQUIRED

        start = parse_iso_date(preferences.start_date)
        if start is None or start < self.today():
            return ValidationRule.START_DATE_IN_PAST

        end = parse_iso_date(preferences.end_date)
        if end is None or end <= start:
            return ValidationRule.END_DATE_NOT_AFTER_START

        budget = parse_budget(preferences.budget)
        if budget is None or budget <= 0:
            return ValidationRule.BUDGET_REQUIRED

        if preferences.travel_style is None:
            return ValidationRule.TRAVEL_STYLE_REQUIRED

        if not preferences.interests:
            return ValidationRule.INTERESTS_REQUIRED

        if preferences.mode_of_travel is None:
            return ValidationRule.TRAVEL_MODE_REQUIRED

        return None
