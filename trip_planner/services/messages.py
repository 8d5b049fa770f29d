"""User-facing notifications emitted by the workflow coordinators."""

from __future__ import annotations

from ..domain.models import Notification, Severity

ITINERARY_GENERATED = Notification(
    "Itinerary generated!",
    "Your personalized travel plan is ready.",
)
GENERATION_FAILED = Notification(
    "Generation failed",
    "Unable to generate itinerary. Please try again.",
    Severity.DESTRUCTIVE,
)
REGENERATING = Notification(
    "Regenerating itinerary...",
    "Creating a new personalized travel plan for you.",
)
REGENERATED = Notification(
    "New itinerary generated!",
    "Your fresh travel plan is ready.",
)
REGENERATION_FAILED = Notification(
    "Regeneration failed",
    "Unable to create a new itinerary. Your previous plan is still available.",
    Severity.DESTRUCTIVE,
)

NOTHING_TO_EXPORT = Notification(
    "No itinerary to export",
    "Please generate an itinerary first.",
    Severity.DESTRUCTIVE,
)
PREPARING_EXPORT = Notification(
    "Preparing PDF...",
    "Your itinerary is being formatted for download.",
)
EXPORT_SUCCEEDED = Notification(
    "PDF exported successfully!",
    "Your itinerary has been downloaded.",
)
EXPORT_FAILED = Notification(
    "Export failed",
    "There was an error creating your PDF. Please try again.",
    Severity.DESTRUCTIVE,
)
