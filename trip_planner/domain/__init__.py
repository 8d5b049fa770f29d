"""Domain layer - Core business models and errors.

This module contains the immutable trip records, the wizard screens
and typed errors used throughout the application. No external
dependencies.
"""

from .errors import (
    ConfigurationError,
    ExportError,
    TransportError,
    TripPlannerError,
    ValidationError,
)
from .models import (
    INTEREST_CATALOG,
    Currency,
    GenerationResult,
    Notification,
    Screen,
    Severity,
    TravelMode,
    TravelStyle,
    TripPreferences,
    destination_key,
)

__all__ = [
    # Models
    "Screen",
    "Currency",
    "TravelStyle",
    "TravelMode",
    "INTEREST_CATALOG",
    "Severity",
    "Notification",
    "TripPreferences",
    "GenerationResult",
    "destination_key",
    # Errors
    "TripPlannerError",
    "ValidationError",
    "TransportError",
    "ExportError",
    "ConfigurationError",
]
