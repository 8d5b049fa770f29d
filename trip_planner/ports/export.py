"""Export port - Abstraction for document encoders.

This protocol defines the contract for writing an itinerary together
with its trip metadata into a downloadable document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import TripPreferences


class ExportEncoderPort(Protocol):
    """Port for itinerary export.

    Implementation: adapters/export/reportlab_encoder.py

    Failure is signaled either by returning False or by raising; callers
    treat both the same way.
    """

    async def encode(
        self,
        itinerary_text: str,
        metadata: TripPreferences,
        filename: str,
    ) -> bool:
        """Encode an itinerary into a named document.

        Args:
            itinerary_text: The itinerary to export.
            metadata: Trip preferences shown alongside the itinerary.
            filename: Name of the document to produce.

        Returns:
            True if the document was produced.
        """
        ...
