"""Tests for the export workflow."""

import asyncio

from trip_planner.domain.errors import ExportError
from trip_planner.domain.models import GenerationResult, Screen, TripPreferences
from trip_planner.services import export_filename


def with_itinerary(controller, text="Day 1..."):
    controller.store_result(GenerationResult(text, controller.form.preferences))
    controller.navigate(Screen.RESULTS)


def test_filename_from_destinations():
    prefs = TripPreferences(destination=("Goa", "New Delhi"))

    assert export_filename(prefs) == "goa_new delhi_itinerary.pdf"
    assert export_filename(prefs, ".txt") == "goa_new delhi.txt"


def test_nothing_to_export(exporter, encoder, notifier):
    assert asyncio.run(exporter.export()) is False

    assert encoder.calls == []
    assert notifier.titles == ["No itinerary to export"]


def test_empty_itinerary_is_not_exported(exporter, controller, encoder, notifier):
    with_itinerary(controller, "")

    assert asyncio.run(exporter.export()) is False
    assert encoder.calls == []


def test_success(exporter, controller, encoder, notifier):
    with_itinerary(controller)

    assert asyncio.run(exporter.export()) is True

    assert encoder.calls == [
        ("Day 1...", controller.form.preferences, "goa_jaipur_itinerary.pdf")
    ]
    assert notifier.titles == ["Preparing PDF...", "PDF exported successfully!"]


def test_encoder_returning_false_is_failure(exporter, controller, encoder, notifier):
    with_itinerary(controller)
    encoder.result = False

    assert asyncio.run(exporter.export()) is False
    assert notifier.titles[-1] == "Export failed"


def test_encoder_raising_is_failure(exporter, controller, encoder, notifier):
    with_itinerary(controller)
    encoder.error = ExportError("disk full")

    assert asyncio.run(exporter.export()) is False
    assert notifier.titles == ["Preparing PDF...", "Export failed"]


def test_export_does_not_change_state(exporter, controller):
    with_itinerary(controller)
    result = controller.result
    prefs = controller.form.preferences

    asyncio.run(exporter.export())

    assert controller.screen is Screen.RESULTS
    assert controller.result is result
    assert controller.form.preferences is prefs


def test_concurrent_exports_are_tolerated(exporter, controller, encoder):
    with_itinerary(controller)

    async def scenario():
        return await asyncio.gather(exporter.export(), exporter.export())

    assert asyncio.run(scenario()) == [True, True]
    assert len(encoder.calls) == 2


def test_generation_result_emptiness():
    assert GenerationResult("", TripPreferences()).is_empty
    assert not GenerationResult("Day 1", TripPreferences()).is_empty
