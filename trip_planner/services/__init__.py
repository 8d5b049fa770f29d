"""Services layer - Application orchestration.

This module contains the wizard state and the coordinators that drive
it through the external collaborators.

Available services:
- ScreenController: Screen state machine and shared session state
- FormModel: Trip preferences and their input widgets
- Validator: Ordered submission rules
- SubmissionCoordinator: Generate and regenerate requests
- ExportCoordinator: Itinerary document export
- TripPlannerSession: Everything above for one user session
"""

from .export import ExportCoordinator, export_filename
from .form import FormModel
from .screens import ScreenController, ScreenEvent, transition
from .session import TripPlannerSession
from .submission import SubmissionCoordinator
from .validation import (
    ValidationResult,
    ValidationRule,
    Validator,
    parse_budget,
    parse_iso_date,
)

__all__ = [
    "ScreenController",
    "ScreenEvent",
    "transition",
    "FormModel",
    "Validator",
    "ValidationRule",
    "ValidationResult",
    "parse_budget",
    "parse_iso_date",
    "SubmissionCoordinator",
    "ExportCoordinator",
    "export_filename",
    "TripPlannerSession",
]
