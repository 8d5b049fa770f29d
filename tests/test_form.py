"""Tests for the FormModel and TripPreferences records."""

import pytest

from trip_planner.domain.models import (
    INTEREST_CATALOG,
    Currency,
    TravelMode,
    TravelStyle,
    TripPreferences,
)

from .conftest import valid_preferences


def test_new_form_is_empty(form):
    prefs = form.preferences

    assert prefs.destination == ()
    assert prefs.start_date == prefs.end_date == prefs.budget == ""
    assert prefs.currency is Currency.INR
    assert prefs.travel_style is None
    assert prefs.interests == frozenset()
    assert prefs.mode_of_travel is None


def test_interest_toggle_adds_then_removes(form):
    form.toggle_interest("Food")
    form.toggle_interest("Beaches")
    assert form.preferences.interests == {"Food", "Beaches"}
    assert form.interest_count == 2

    form.toggle_interest("Food")
    assert form.preferences.interests == {"Beaches"}


def test_unknown_interest_is_rejected(form):
    with pytest.raises(ValueError):
        form.toggle_interest("Skydiving")


def test_selections_accept_enum_values(form):
    form.select_currency("USD")
    form.select_travel_style("Adventure")
    form.select_mode_of_travel(TravelMode.CAR)

    assert form.preferences.currency is Currency.USD
    assert form.preferences.travel_style is TravelStyle.ADVENTURE
    assert form.preferences.mode_of_travel is TravelMode.CAR


def test_selection_outside_enumeration_is_rejected(form):
    with pytest.raises(ValueError):
        form.select_mode_of_travel("Boat")


def test_commits_replace_the_record(form):
    before = form.preferences
    form.destination_editor.paste("Goa,")

    assert form.preferences is not before
    assert before.destination == ()
    assert form.destination_count == 1


def test_sorted_interests_follow_catalog_order():
    prefs = TripPreferences(interests=frozenset({"Festivals", "Temples", "Food"}))

    assert prefs.sorted_interests == ("Temples", "Food", "Festivals")
    assert set(prefs.sorted_interests) <= set(INTEREST_CATALOG)


def test_destination_label():
    assert valid_preferences().destination_label == "Goa, Jaipur"


def test_unchanged_commit_keeps_record(form):
    form.destination_editor.paste("Goa,")
    before = form.preferences
    form.destination_editor.paste("GOA,")

    assert form.preferences is before
