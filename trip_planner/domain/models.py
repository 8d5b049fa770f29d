"""Domain models for the trip planner.

Records are frozen dataclasses with slots: every change to the trip
preferences produces a new TripPreferences, so a snapshot handed to a
generation request or an export can never change underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional


class Screen(Enum):
    """Wizard screens; exactly one is active at a time."""

    LANDING = "landing"
    FORM = "form"
    LOADING = "loading"
    RESULTS = "results"


class Currency(str, Enum):
    INR = "INR"
    USD = "USD"


class TravelStyle(str, Enum):
    RELAXED = "Relaxed"
    ADVENTURE = "Adventure"
    LUXURY = "Luxury"
    FAMILY = "Family"
    BACKPACKER = "Backpacker"


class TravelMode(str, Enum):
    FLIGHT = "Flight"
    TRAIN = "Train"
    BUS = "Bus"
    CAR = "Car"


INTEREST_CATALOG: tuple[str, ...] = (
    "Temples",
    "Beaches",
    "Food",
    "Trekking",
    "Heritage Sites",
    "Shopping",
    "Nightlife",
    "Festivals",
)


class Severity(Enum):
    """Notification severity."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class Notification:
    """User feedback message handed to the notification sink.

    Attributes:
        title: Short headline
        description: One-sentence explanation
        severity: DEFAULT for progress/success, DESTRUCTIVE for failures
    """

    title: str
    description: str
    severity: Severity = Severity.DEFAULT


def destination_key(name: str) -> str:
    """Comparison key under which two destinations are duplicates."""
    return name.strip().lower()


@dataclass(frozen=True, slots=True)
class TripPreferences:
    """Everything the user has entered about the trip.

    Empty strings mean "not set yet"; the Validator decides whether the
    record is complete enough to submit.

    Attributes:
        destination: Ordered, case-insensitively unique destination names
        start_date: ISO start date, or "" when unset
        end_date: ISO end date, or "" when unset
        budget: Budget amount as typed, or ""
        currency: Budget currency
        travel_style: Selected style, or None
        interests: Selected interests from INTEREST_CATALOG
        mode_of_travel: Selected travel mode, or None
    """

    destination: tuple[str, ...] = field(default_factory=tuple)
    start_date: str = ""
    end_date: str = ""
    budget: str = ""
    currency: Currency = Currency.INR
    travel_style: Optional[TravelStyle] = None
    interests: frozenset[str] = field(default_factory=frozenset)
    mode_of_travel: Optional[TravelMode] = None

    def with_destinations(self, names: Iterable[str]) -> TripPreferences:
        """Append names that are not already present.

        Each name is trimmed; empty names and names matching an existing
        entry case-insensitively are skipped. First-seen casing wins.
        """
        seen = {destination_key(d) for d in self.destination}
        added = list(self.destination)
        for raw in names:
            trimmed = raw.strip()
            if not trimmed or trimmed.lower() in seen:
                continue
            added.append(trimmed)
            seen.add(trimmed.lower())
        if len(added) == len(self.destination):
            return self
        return replace(self, destination=tuple(added))

    def without_destination(self, name: str) -> TripPreferences:
        """Remove the entry exactly equal to ``name``."""
        if name not in self.destination:
            return self
        return replace(
            self, destination=tuple(d for d in self.destination if d != name)
        )

    def without_last_destination(self) -> TripPreferences:
        """Remove the most recently added destination, if any."""
        if not self.destination:
            return self
        return replace(self, destination=self.destination[:-1])

    def with_interest_toggled(self, interest: str) -> TripPreferences:
        """Add the interest if absent, remove it if present."""
        if interest not in INTEREST_CATALOG:
            raise ValueError(f"Unknown interest: {interest!r}")
        if interest in self.interests:
            return replace(self, interests=self.interests - {interest})
        return replace(self, interests=self.interests | {interest})

    @property
    def destination_label(self) -> str:
        """Destinations as a single display string."""
        return ", ".join(self.destination)

    @property
    def sorted_interests(self) -> tuple[str, ...]:
        """Interests in catalog order, for stable serialization."""
        return tuple(i for i in INTEREST_CATALOG if i in self.interests)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Itinerary returned by the generation service.

    Attributes:
        itinerary: Generated itinerary text
        preferences: Snapshot of the preferences that were submitted
        request_number: Number of the request this result answers
    """

    itinerary: str
    preferences: TripPreferences
    request_number: int = 0

    @property
    def is_empty(self) -> bool:
        """Check if there is no itinerary text to show or export."""
        return not self.itinerary
