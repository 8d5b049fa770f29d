"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
collaborators. They enable dependency injection and make the system
testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (widgets, navigation)
- Output ports: How the application drives external systems (adapters)
"""

from .export import ExportEncoderPort
from .generation import ItineraryGeneratorPort
from .navigation import NavigationPort, ScreenRequest
from .notification import NotificationSinkPort
from .picker import DatePickerHook

__all__ = [
    # Generation
    "ItineraryGeneratorPort",
    # Export
    "ExportEncoderPort",
    # Feedback
    "NotificationSinkPort",
    # Navigation
    "NavigationPort",
    "ScreenRequest",
    # Widgets
    "DatePickerHook",
]
