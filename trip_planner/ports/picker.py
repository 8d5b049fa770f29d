"""Date picker port - Optional native picker integration."""

from __future__ import annotations

from typing import Protocol


class DatePickerHook(Protocol):
    """Opens a platform date picker when a date field gains focus.

    Implementations may be a no-op. Any exception raised is discarded
    by the date field.
    """

    def __call__(self) -> None:
        ...
