"""Tests for the screen state machine and controller."""

import pytest

from trip_planner.domain.models import Screen
from trip_planner.services import ScreenController, ScreenEvent, transition

from .conftest import FakeNavigator


@pytest.mark.parametrize(
    "screen, event, expected",
    [
        (Screen.LANDING, ScreenEvent.START_PLANNING, Screen.FORM),
        (Screen.FORM, ScreenEvent.SUBMIT_ACCEPTED, Screen.LOADING),
        (Screen.LOADING, ScreenEvent.GENERATION_SUCCEEDED, Screen.RESULTS),
        (Screen.LOADING, ScreenEvent.GENERATION_FAILED, Screen.FORM),
        (Screen.RESULTS, ScreenEvent.REGENERATE, Screen.LOADING),
        (Screen.LOADING, ScreenEvent.REGENERATE_FAILED, Screen.RESULTS),
    ],
)
def test_defined_transitions(screen, event, expected):
    assert transition(screen, event) is expected


@pytest.mark.parametrize(
    "screen, event",
    [
        (Screen.LANDING, ScreenEvent.SUBMIT_ACCEPTED),
        (Screen.LANDING, ScreenEvent.GENERATION_SUCCEEDED),
        (Screen.FORM, ScreenEvent.REGENERATE),
        (Screen.RESULTS, ScreenEvent.START_PLANNING),
    ],
)
def test_undefined_events_leave_screen_unchanged(screen, event):
    assert transition(screen, event) is screen


def test_every_screen_is_reachable():
    reachable = {Screen.LANDING}
    frontier = [Screen.LANDING]
    while frontier:
        screen = frontier.pop()
        for event in ScreenEvent:
            target = transition(screen, event)
            if target not in reachable:
                reachable.add(target)
                frontier.append(target)

    assert reachable == set(Screen)


def test_controller_starts_on_landing():
    controller = ScreenController()

    assert controller.screen is Screen.LANDING
    assert controller.result is None
    assert controller.busy is False


def test_attach_shows_current_screen():
    controller = ScreenController()
    navigator = FakeNavigator()

    controller.attach(navigator)

    assert navigator.shown == [Screen.LANDING]


def test_dispatch_notifies_navigator():
    navigator = FakeNavigator()
    controller = ScreenController(navigator=navigator)

    assert controller.dispatch(ScreenEvent.START_PLANNING) is Screen.FORM
    assert navigator.shown == [Screen.FORM]


def test_ignored_event_does_not_notify():
    navigator = FakeNavigator()
    controller = ScreenController(navigator=navigator)

    controller.dispatch(ScreenEvent.REGENERATE)

    assert controller.screen is Screen.LANDING
    assert navigator.shown == []


def test_navigator_can_jump_directly():
    navigator = FakeNavigator()
    controller = ScreenController()
    controller.attach(navigator)

    navigator.request_change(Screen.RESULTS)

    assert controller.screen is Screen.RESULTS
    assert navigator.shown == [Screen.LANDING, Screen.RESULTS]


def test_navigating_to_same_screen_is_a_no_op():
    navigator = FakeNavigator()
    controller = ScreenController(navigator=navigator, screen=Screen.FORM)

    controller.navigate(Screen.FORM)

    assert navigator.shown == []


def test_leaving_loading_supersedes_outstanding_request():
    controller = ScreenController(screen=Screen.LOADING)
    request = controller.begin_request()
    assert controller.busy

    controller.navigate(Screen.FORM)

    assert controller.busy is False
    assert controller.is_current(request) is False


def test_requests_are_numbered_monotonically():
    controller = ScreenController()
    first = controller.begin_request()
    controller.finish_request(first)
    second = controller.begin_request()

    assert second > first
    assert controller.is_current(second)
    assert not controller.is_current(first)


def test_finishing_stale_request_keeps_busy_flag():
    controller = ScreenController()
    first = controller.begin_request()
    second = controller.begin_request()

    controller.finish_request(first)

    assert controller.busy
    controller.finish_request(second)
    assert controller.busy is False


@pytest.mark.parametrize(
    "start, event, expected",
    [
        (Screen.RESULTS, ScreenEvent.SUBMIT_ACCEPTED, Screen.LOADING),
        (Screen.FORM, ScreenEvent.REGENERATE, Screen.LOADING),
        (Screen.FORM, ScreenEvent.GENERATION_SUCCEEDED, Screen.RESULTS),
        (Screen.RESULTS, ScreenEvent.GENERATION_FAILED, Screen.FORM),
    ],
)
def test_enter_moves_regardless_of_active_screen(start, event, expected):
    navigator = FakeNavigator()
    controller = ScreenController(navigator=navigator, screen=start)

    assert controller.enter(event) is expected
    assert controller.screen is expected
    assert navigator.shown == [expected]


def test_enter_current_screen_does_not_notify():
    navigator = FakeNavigator()
    controller = ScreenController(navigator=navigator, screen=Screen.LOADING)

    controller.enter(ScreenEvent.SUBMIT_ACCEPTED)

    assert navigator.shown == []
