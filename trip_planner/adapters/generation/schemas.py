"""Wire schemas for the itinerary-generation service."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models import TripPreferences


class GenerationRequest(BaseModel):
    """Flat record POSTed to the generation endpoint.

    Field names on the wire are camelCase; unset selections are sent as
    empty strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    destination: List[str]
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    budget: str
    currency: str
    travel_style: str = Field(alias="travelStyle")
    interests: List[str]
    mode_of_travel: str = Field(alias="modeOfTravel")

    @classmethod
    def from_preferences(cls, preferences: TripPreferences) -> GenerationRequest:
        return cls(
            destination=list(preferences.destination),
            start_date=preferences.start_date,
            end_date=preferences.end_date,
            budget=preferences.budget,
            currency=preferences.currency.value,
            travel_style=preferences.travel_style.value if preferences.travel_style else "",
            interests=list(preferences.sorted_interests),
            mode_of_travel=preferences.mode_of_travel.value if preferences.mode_of_travel else "",
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class GenerationResponse(BaseModel):
    """Body of a successful generation response."""

    itinerary: str
