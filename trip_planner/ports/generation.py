"""Generation port - Abstraction for the itinerary-generation service.

This protocol defines the contract for turning trip preferences into an
itinerary, allowing different transports (HTTP, in-process fakes) to be
used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import TripPreferences


class ItineraryGeneratorPort(Protocol):
    """Port for itinerary generation.

    Implementation: adapters/generation/http_generator.py

    One call is one request; the caller is responsible for preventing
    overlapping requests.
    """

    async def generate(self, preferences: TripPreferences) -> str:
        """Request an itinerary for the given preferences.

        Args:
            preferences: The complete trip preferences to submit.

        Returns:
            The generated itinerary text.

        Raises:
            TransportError: If the request fails or the service answers
                with a non-success status.
        """
        ...
