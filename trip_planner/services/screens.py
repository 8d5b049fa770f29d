"""Screen orchestration for the planning wizard.

The wizard is a finite-state machine over Screen. Workflow events move
it through a pure transition table; the navigation collaborator may
also jump directly to any screen. The ScreenController owns everything
the screens share: the form, the latest generation result and the
request bookkeeping that keeps generation requests from overlapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional, Tuple

from ..domain.models import GenerationResult, Screen
from ..ports.navigation import NavigationPort
from .form import FormModel


class ScreenEvent(Enum):
    """Workflow events that drive screen transitions."""

    START_PLANNING = auto()
    SUBMIT_ACCEPTED = auto()
    GENERATION_SUCCEEDED = auto()
    GENERATION_FAILED = auto()
    REGENERATE = auto()
    REGENERATE_FAILED = auto()


TRANSITIONS: Dict[Tuple[Screen, ScreenEvent], Screen] = {
    (Screen.LANDING, ScreenEvent.START_PLANNING): Screen.FORM,
    (Screen.FORM, ScreenEvent.SUBMIT_ACCEPTED): Screen.LOADING,
    (Screen.LOADING, ScreenEvent.GENERATION_SUCCEEDED): Screen.RESULTS,
    (Screen.LOADING, ScreenEvent.GENERATION_FAILED): Screen.FORM,
    (Screen.RESULTS, ScreenEvent.REGENERATE): Screen.LOADING,
    (Screen.LOADING, ScreenEvent.REGENERATE_FAILED): Screen.RESULTS,
}


# Every event leads to a single screen, wherever it is raised from
EVENT_TARGETS: Dict[ScreenEvent, Screen] = {
    event: target for (_, event), target in TRANSITIONS.items()
}


def transition(screen: Screen, event: ScreenEvent) -> Screen:
    """Return the screen that follows ``screen`` on ``event``.

    Events that are not defined for the current screen leave it
    unchanged.
    """
    return TRANSITIONS.get((screen, event), screen)


@dataclass
class ScreenController:
    """Top-level wizard state.

    Attributes:
        form: The authoritative trip preferences and their widgets
        navigator: Optional collaborator rendering the active screen
        screen: The active screen
        result: Latest successful generation, if any
    """

    form: FormModel = field(default_factory=FormModel)
    navigator: Optional[NavigationPort] = None
    screen: Screen = Screen.LANDING
    result: Optional[GenerationResult] = None

    _request_counter: int = field(default=0, repr=False)
    _active_request: Optional[int] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def busy(self) -> bool:
        """True while a generation request is outstanding."""
        return self._active_request is not None

    @property
    def itinerary(self) -> str:
        return self.result.itinerary if self.result else ""

    def attach(self, navigator: NavigationPort) -> None:
        """Connect a navigation collaborator and show the active screen."""
        self.navigator = navigator
        navigator.show(self.screen, self.navigate)

    def dispatch(self, event: ScreenEvent) -> Screen:
        """Apply a workflow event and return the resulting screen."""
        target = transition(self.screen, event)
        if target is self.screen:
            self._logger.debug(
                "Event ignored",
                extra={"event": event.name, "screen": self.screen.value},
            )
            return self.screen
        self._set_screen(target, reason=event.name)
        return target

    def enter(self, event: ScreenEvent) -> Screen:
        """Move to the screen ``event`` leads to, whatever the active screen.

        Used for request outcomes, which apply even after the navigator
        has moved the wizard off the screen the request started from.
        """
        target = EVENT_TARGETS[event]
        if target is not self.screen:
            self._set_screen(target, reason=event.name)
        return target

    def navigate(self, screen: Screen) -> None:
        """Jump directly to ``screen`` on behalf of the navigator.

        Leaving the loading screen abandons the outstanding request: its
        response will be discarded when it arrives.
        """
        if screen is self.screen:
            return
        if self.screen is Screen.LOADING and self.busy:
            self._logger.info(
                "Navigation superseded outstanding request",
                extra={"request": self._active_request, "target": screen.value},
            )
            self._active_request = None
        self._set_screen(screen, reason="navigation")

    def begin_request(self) -> int:
        """Mark a generation request as outstanding and number it."""
        self._request_counter += 1
        self._active_request = self._request_counter
        self._logger.debug("Request started", extra={"request": self._request_counter})
        return self._request_counter

    def is_current(self, request_number: int) -> bool:
        """Check whether a response to ``request_number`` should be applied."""
        return request_number == self._active_request

    def finish_request(self, request_number: int) -> None:
        """Clear the busy flag if ``request_number`` is still current."""
        if self.is_current(request_number):
            self._active_request = None

    def store_result(self, result: GenerationResult) -> None:
        """Replace the generation result wholesale."""
        self.result = result
        self._logger.info(
            "Itinerary stored",
            extra={"request": result.request_number, "chars": len(result.itinerary)},
        )

    def _set_screen(self, screen: Screen, reason: str) -> None:
        previous = self.screen
        self.screen = screen
        self._logger.info(
            "Screen changed",
            extra={"from": previous.value, "to": screen.value, "reason": reason},
        )
        if self.navigator is not None:
            self.navigator.show(screen, self.navigate)
