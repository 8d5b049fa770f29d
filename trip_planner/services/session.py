"""Planning session - one wizard run wired to its collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.models import Screen, TripPreferences
from .export import ExportCoordinator
from .form import FormModel
from .screens import ScreenController, ScreenEvent
from .submission import SubmissionCoordinator


@dataclass
class TripPlannerSession:
    """Entry point for a user's trip-planning session.

    The session starts on the landing screen with empty preferences,
    which then live for as long as the session does.

    Usage:
        session = container.resolve(TripPlannerSession)
        session.start_planning()
        session.form.destination_editor.type_text("Goa, Jaipur,")
        await session.submit()
        await session.export_pdf()
    """

    controller: ScreenController
    submission: SubmissionCoordinator
    exporter: ExportCoordinator

    @property
    def screen(self) -> Screen:
        return self.controller.screen

    @property
    def form(self) -> FormModel:
        return self.controller.form

    @property
    def preferences(self) -> TripPreferences:
        return self.controller.form.preferences

    @property
    def itinerary(self) -> str:
        return self.controller.itinerary

    @property
    def is_generating(self) -> bool:
        return self.controller.busy

    def start_planning(self) -> Screen:
        return self.controller.dispatch(ScreenEvent.START_PLANNING)

    def navigate(self, screen: Screen) -> None:
        self.controller.navigate(screen)

    async def submit(self) -> bool:
        return await self.submission.submit()

    async def regenerate(self) -> bool:
        return await self.submission.regenerate()

    async def export_pdf(self) -> bool:
        return await self.exporter.export()
