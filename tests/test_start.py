"""Tests for the headless launcher."""

import asyncio
from unittest.mock import patch

from start import build_parser, fill_form, run
from trip_planner.config import AppConfig
from trip_planner.container import Container
from trip_planner.ports.generation import ItineraryGeneratorPort
from trip_planner.services import TripPlannerSession

from .conftest import FakeGenerator

ARGV = [
    "--destinations", "Goa, Jaipur",
    "--start", "2099-01-01",
    "--end", "2099-01-05",
    "--budget", "50000",
    "--style", "Relaxed",
    "--interest", "Food",
    "--interest", "Beaches",
    "--mode", "Train",
]


def make_container(generator: FakeGenerator) -> Container:
    container = Container.create_default(AppConfig())
    container.register(ItineraryGeneratorPort, lambda: generator)
    return container


def test_fill_form_commits_every_field():
    container = make_container(FakeGenerator())
    session = container.resolve(TripPlannerSession)
    session.start_planning()

    fill_form(session, build_parser().parse_args(ARGV))

    preferences = session.preferences
    assert preferences.destination == ("Goa", "Jaipur")
    assert preferences.start_date == "2099-01-01"
    assert preferences.end_date == "2099-01-05"
    assert preferences.budget == "50000"
    assert preferences.sorted_interests == ["Beaches", "Food"]


def test_run_prints_itinerary(capsys):
    generator = FakeGenerator(itinerary="Day 1: Goa")

    with patch("start.configure_logging"), patch(
        "start.Container.create_default", return_value=make_container(generator)
    ):
        code = asyncio.run(run(build_parser().parse_args(ARGV)))

    assert code == 0
    assert "Day 1: Goa" in capsys.readouterr().out


def test_run_fails_on_generation_error():
    generator = FakeGenerator(error=RuntimeError("down"))

    with patch("start.configure_logging"), patch(
        "start.Container.create_default", return_value=make_container(generator)
    ):
        code = asyncio.run(run(build_parser().parse_args(ARGV)))

    assert code == 1


def test_repeated_interest_is_selected_once():
    container = make_container(FakeGenerator())
    session = container.resolve(TripPlannerSession)
    session.start_planning()

    fill_form(session, build_parser().parse_args(ARGV + ["--interest", "Food"]))

    assert session.preferences.sorted_interests == ["Beaches", "Food"]
