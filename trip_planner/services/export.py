"""Export coordinator - itinerary documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.errors import ExportError
from ..domain.models import TripPreferences
from ..ports.export import ExportEncoderPort
from ..ports.notification import NotificationSinkPort
from . import messages
from .screens import ScreenController

DEFAULT_SUFFIX = "_itinerary.pdf"


def export_filename(preferences: TripPreferences, suffix: str = DEFAULT_SUFFIX) -> str:
    """Derive the document name from the destinations.

    Example:
        >>> export_filename(TripPreferences(destination=("Goa", "Jaipur")))
        'goa_jaipur_itinerary.pdf'
    """
    return "_".join(preferences.destination).lower() + suffix


@dataclass
class ExportCoordinator:
    """Hands the current itinerary and trip metadata to an encoder.

    Reads the controller's state but never changes it; overlapping
    exports are allowed.

    Attributes:
        controller: Source of the itinerary and preferences
        encoder: External document encoder
        notifier: Sink for user feedback
        filename_suffix: Appended to the destination-based name
    """

    controller: ScreenController
    encoder: ExportEncoderPort
    notifier: NotificationSinkPort
    filename_suffix: str = DEFAULT_SUFFIX

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def export(self) -> bool:
        """Export the current itinerary.

        Returns:
            True if the encoder produced the document.
        """
        result = self.controller.result
        if result is None or result.is_empty:
            self.notifier.notify(messages.NOTHING_TO_EXPORT)
            return False

        itinerary = result.itinerary
        preferences = self.controller.form.preferences
        document = export_filename(preferences, self.filename_suffix)
        self.notifier.notify(messages.PREPARING_EXPORT)

        try:
            if not await self.encoder.encode(itinerary, preferences, document):
                raise ExportError("Encoder reported failure", filename=document)
        except Exception as e:
            self._logger.error(
                "Export failed",
                extra={"document": document, "error": str(e)},
            )
            self.notifier.notify(messages.EXPORT_FAILED)
            return False

        self._logger.info("Export succeeded", extra={"document": document})
        self.notifier.notify(messages.EXPORT_SUCCEEDED)
        return True
