"""Submission coordinator - generate and regenerate itineraries.

Every request is numbered by the ScreenController and only one may be
current at a time. A response that arrives after its request was
superseded (by navigating away from the loading screen) is discarded
instead of being applied to whatever the user is doing now.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..domain.errors import TransportError, ValidationError
from ..domain.models import GenerationResult, TripPreferences
from ..ports.generation import ItineraryGeneratorPort
from ..ports.notification import NotificationSinkPort
from . import messages
from .screens import ScreenController, ScreenEvent
from .validation import Validator


@dataclass
class SubmissionCoordinator:
    """Drives generation requests for the wizard.

    Attributes:
        controller: Owner of the screen, form and result
        generator: External itinerary-generation service
        notifier: Sink for user feedback
        validator: Rules checked before submitting
    """

    controller: ScreenController
    generator: ItineraryGeneratorPort
    notifier: NotificationSinkPort
    validator: Validator = field(default_factory=Validator)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def submit(self) -> bool:
        """Validate the form and request an itinerary.

        Invalid preferences produce a notification for the first
        violated rule and no screen change. A failed request sends the
        user back to the form.

        Returns:
            True if a new itinerary was stored.
        """
        preferences = self.controller.form.preferences
        try:
            self.validator.ensure_valid(preferences)
        except ValidationError as e:
            self._logger.info("Submission rejected", extra={"rule": e.rule.name})
            self.notifier.notify(e.rule.notification)
            return False

        if self.controller.busy:
            self._logger.info("Submission ignored, request already outstanding")
            return False

        self.controller.enter(ScreenEvent.SUBMIT_ACCEPTED)
        outcome = await self._request(preferences)
        if outcome is None:
            return False

        request, itinerary, failure = outcome
        if failure is not None:
            self._logger.warning(
                "Generation failed",
                extra={
                    "request": request,
                    "status": failure.status_code,
                    "error": str(failure),
                },
            )
            self.notifier.notify(messages.GENERATION_FAILED)
            self.controller.enter(ScreenEvent.GENERATION_FAILED)
            return False

        self.controller.store_result(
            GenerationResult(itinerary, preferences, request_number=request)
        )
        self.controller.enter(ScreenEvent.GENERATION_SUCCEEDED)
        self.notifier.notify(messages.ITINERARY_GENERATED)
        return True

    async def regenerate(self) -> bool:
        """Request a fresh itinerary for the current preferences.

        No-op while another request is outstanding. The preferences are
        not re-validated. On failure the previous itinerary stays on
        screen; without one the user is sent back to the form.

        Returns:
            True if a new itinerary was stored.
        """
        if self.controller.busy:
            self._logger.debug("Regenerate ignored, request already outstanding")
            return False

        preferences = self.controller.form.preferences
        self.notifier.notify(messages.REGENERATING)
        self.controller.enter(ScreenEvent.REGENERATE)
        outcome = await self._request(preferences)
        if outcome is None:
            return False

        request, itinerary, failure = outcome
        if failure is not None:
            self._logger.warning(
                "Regeneration failed",
                extra={
                    "request": request,
                    "status": failure.status_code,
                    "error": str(failure),
                },
            )
            self.notifier.notify(messages.REGENERATION_FAILED)
            if self.controller.result is not None:
                self.controller.enter(ScreenEvent.REGENERATE_FAILED)
            else:
                self.controller.enter(ScreenEvent.GENERATION_FAILED)
            return False

        self.controller.store_result(
            GenerationResult(itinerary, preferences, request_number=request)
        )
        self.controller.enter(ScreenEvent.GENERATION_SUCCEEDED)
        self.notifier.notify(messages.REGENERATED)
        return True

    async def _request(
        self, preferences: TripPreferences
    ) -> Optional[Tuple[int, str, Optional[TransportError]]]:
        """Issue one numbered request.

        Returns:
            (request number, itinerary, failure), or None if the request
            was superseded while it was outstanding.
        """
        request = self.controller.begin_request()
        itinerary = ""
        failure: Optional[TransportError] = None
        try:
            itinerary = await self.generator.generate(preferences)
        except TransportError as e:
            failure = e
        except Exception as e:
            self._logger.exception("Unexpected error from generation service")
            failure = TransportError("Generation service error", cause=e)
        finally:
            current = self.controller.is_current(request)
            self.controller.finish_request(request)

        if not current:
            self._logger.info(
                "Discarding superseded response",
                extra={"request": request, "failed": failure is not None},
            )
            return None
        return request, itinerary, failure
