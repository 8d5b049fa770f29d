"""HTTP itinerary generator adapter.

POSTs the trip preferences as JSON to the generation endpoint and reads
the itinerary back. Every way the exchange can go wrong surfaces as a
TransportError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx
from pydantic import ValidationError as SchemaError

from ...config import GenerationConfig, get_config
from ...domain.errors import ConfigurationError, TransportError
from ...domain.models import TripPreferences
from .schemas import GenerationRequest, GenerationResponse


@dataclass
class HttpItineraryGenerator:
    """Generation service client over HTTP.

    This adapter implements ItineraryGeneratorPort with httpx. A fresh
    client is opened per request; pass ``transport`` to route requests
    somewhere other than the network (e.g. httpx.MockTransport).

    Attributes:
        config: Generation service configuration
        transport: Optional httpx transport override
    """

    config: GenerationConfig = field(default_factory=lambda: get_config().generation)
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        try:
            url = httpx.URL(self.config.endpoint_url)
        except httpx.InvalidURL as e:
            url, cause = None, e
        else:
            cause = None
        if url is None or url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(
                f"Invalid generation endpoint: {self.config.endpoint_url!r}",
                cause=cause,
                setting_name="TRIP_GEN_ENDPOINT_URL",
                expected_type="http(s) URL",
            )

    async def generate(self, preferences: TripPreferences) -> str:
        """Request an itinerary from the generation service.

        Args:
            preferences: The complete trip preferences to submit.

        Returns:
            The generated itinerary text.

        Raises:
            TransportError: On network failure, non-success status or a
                response body without an itinerary.
        """
        endpoint = self.config.endpoint_url
        payload = GenerationRequest.from_preferences(preferences).to_payload()

        self._logger.info(
            "Requesting itinerary",
            extra={"endpoint": endpoint, "destinations": len(preferences.destination)},
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                transport=self.transport,
            ) as client:
                response = await client.post(endpoint, json=payload)
        except httpx.HTTPError as e:
            self._logger.warning(
                "Generation request failed",
                extra={"endpoint": endpoint, "error": str(e)},
            )
            raise TransportError(
                "Generation request failed", cause=e, endpoint=endpoint
            )

        if not response.is_success:
            self._logger.warning(
                "Generation service returned an error",
                extra={"endpoint": endpoint, "status": response.status_code},
            )
            raise TransportError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                endpoint=endpoint,
            )

        try:
            body = GenerationResponse.model_validate_json(response.content)
        except SchemaError as e:
            raise TransportError(
                "Malformed generation response",
                cause=e,
                status_code=response.status_code,
                endpoint=endpoint,
            )

        self._logger.info(
            "Itinerary received",
            extra={"endpoint": endpoint, "chars": len(body.itinerary)},
        )
        return body.itinerary
