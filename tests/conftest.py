"""Shared fixtures: fake collaborators and a pinned calendar."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import List, Optional, Tuple

import pytest

from trip_planner.adapters.notification import RecordingNotificationSink
from trip_planner.domain.models import (
    Currency,
    Screen,
    TravelMode,
    TravelStyle,
    TripPreferences,
)
from trip_planner.services import (
    ExportCoordinator,
    FormModel,
    ScreenController,
    SubmissionCoordinator,
    Validator,
)

TODAY = date(2025, 6, 10)


def pinned_today() -> date:
    return TODAY


def valid_preferences(**overrides) -> TripPreferences:
    values = dict(
        destination=("Goa", "Jaipur"),
        start_date="2025-06-10",
        end_date="2025-06-11",
        budget="50000",
        currency=Currency.INR,
        travel_style=TravelStyle.RELAXED,
        interests=frozenset({"Beaches", "Food"}),
        mode_of_travel=TravelMode.TRAIN,
    )
    values.update(overrides)
    return TripPreferences(**values)


class FakeGenerator:
    """ItineraryGeneratorPort double.

    Set ``gate`` to an asyncio.Event to hold responses until it is set.
    """

    def __init__(self, itinerary: str = "Day 1...", error: Optional[Exception] = None):
        self.itinerary = itinerary
        self.error = error
        self.gate: Optional[asyncio.Event] = None
        self.calls: List[TripPreferences] = []

    async def generate(self, preferences: TripPreferences) -> str:
        self.calls.append(preferences)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.itinerary


class FakeEncoder:
    """ExportEncoderPort double recording every call."""

    def __init__(self, result: bool = True, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[Tuple[str, TripPreferences, str]] = []

    async def encode(self, itinerary_text: str, metadata: TripPreferences, filename: str) -> bool:
        self.calls.append((itinerary_text, metadata, filename))
        if self.error is not None:
            raise self.error
        return self.result


class FakeNavigator:
    """NavigationPort double remembering every screen shown."""

    def __init__(self):
        self.shown: List[Screen] = []
        self.request_change = None

    def show(self, screen, request_change) -> None:
        self.shown.append(screen)
        self.request_change = request_change


@pytest.fixture
def notifier() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture
def validator() -> Validator:
    return Validator(today=pinned_today)


@pytest.fixture
def form() -> FormModel:
    return FormModel(today=pinned_today)


@pytest.fixture
def controller() -> ScreenController:
    """Controller on the form screen with complete, valid preferences."""
    return ScreenController(
        form=FormModel(today=pinned_today, preferences=valid_preferences()),
        screen=Screen.FORM,
    )


@pytest.fixture
def submission(controller, generator, notifier, validator) -> SubmissionCoordinator:
    return SubmissionCoordinator(
        controller=controller,
        generator=generator,
        notifier=notifier,
        validator=validator,
    )


@pytest.fixture
def exporter(controller, encoder, notifier) -> ExportCoordinator:
    return ExportCoordinator(controller=controller, encoder=encoder, notifier=notifier)
