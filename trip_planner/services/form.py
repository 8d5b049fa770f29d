"""Trip preferences form.

FormModel holds the authoritative TripPreferences and the widgets that
edit it. Widgets only report commits; the form turns each commit into a
new TripPreferences and pushes the committed values back to the widgets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Callable, Iterable, Optional, Union

from ..domain.models import (
    Currency,
    TravelMode,
    TravelStyle,
    TripPreferences,
)
from ..ports.picker import DatePickerHook
from ..widgets import BudgetField, DateField, DestinationEditor


@dataclass
class FormModel:
    """Authoritative trip preferences plus their input widgets.

    Attributes:
        today: Returns the current date, used for the date min hints
        date_picker: Optional native picker hook shared by both date fields
        preferences: The committed trip preferences
    """

    today: Callable[[], date] = date.today
    date_picker: Optional[DatePickerHook] = None
    preferences: TripPreferences = field(default_factory=TripPreferences)

    destination_editor: DestinationEditor = field(init=False)
    start_date_field: DateField = field(init=False)
    end_date_field: DateField = field(init=False)
    budget_field: BudgetField = field(init=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.destination_editor = DestinationEditor(
            on_commit=self.add_destinations,
            on_remove_last=self.remove_last_destination,
        )
        self.start_date_field = DateField(
            on_commit=self.set_start_date,
            value=self.preferences.start_date,
            picker=self.date_picker,
        )
        self.end_date_field = DateField(
            on_commit=self.set_end_date,
            value=self.preferences.end_date,
            picker=self.date_picker,
        )
        self.budget_field = BudgetField(
            on_commit=self.set_budget,
            value=self.preferences.budget,
        )
        self._refresh_widgets()

    # Min hints

    @property
    def start_date_min(self) -> str:
        return self.today().isoformat()

    @property
    def end_date_min(self) -> str:
        """The start date when set, otherwise tomorrow."""
        if self.preferences.start_date:
            return self.preferences.start_date
        return (self.today() + timedelta(days=1)).isoformat()

    # Destinations

    def add_destinations(self, names: Iterable[str]) -> None:
        self._update(self.preferences.with_destinations(names))

    def remove_destination(self, name: str) -> None:
        self._update(self.preferences.without_destination(name))

    def remove_last_destination(self) -> None:
        self._update(self.preferences.without_last_destination())

    # Committed scalar fields

    def set_start_date(self, value: str) -> None:
        self._update(replace(self.preferences, start_date=value))

    def set_end_date(self, value: str) -> None:
        self._update(replace(self.preferences, end_date=value))

    def set_budget(self, value: str) -> None:
        self._update(replace(self.preferences, budget=value))

    # Selections

    def select_currency(self, currency: Union[Currency, str]) -> None:
        self._update(replace(self.preferences, currency=Currency(currency)))

    def select_travel_style(self, style: Union[TravelStyle, str]) -> None:
        self._update(replace(self.preferences, travel_style=TravelStyle(style)))

    def select_mode_of_travel(self, mode: Union[TravelMode, str]) -> None:
        self._update(replace(self.preferences, mode_of_travel=TravelMode(mode)))

    def toggle_interest(self, interest: str) -> None:
        self._update(self.preferences.with_interest_toggled(interest))

    # Counters shown next to the field labels

    @property
    def destination_count(self) -> int:
        return len(self.preferences.destination)

    @property
    def interest_count(self) -> int:
        return len(self.preferences.interests)

    def _update(self, preferences: TripPreferences) -> None:
        if preferences == self.preferences:
            return
        self.preferences = preferences
        self._logger.debug(
            "Preferences updated",
            extra={
                "destinations": len(preferences.destination),
                "interests": len(preferences.interests),
            },
        )
        self._refresh_widgets()

    def _refresh_widgets(self) -> None:
        self.start_date_field.sync(self.preferences.start_date)
        self.start_date_field.min = self.start_date_min
        self.end_date_field.sync(self.preferences.end_date)
        self.end_date_field.min = self.end_date_min
        self.budget_field.sync(self.preferences.budget)
