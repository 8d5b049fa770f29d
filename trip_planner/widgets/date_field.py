"""Date entry field with commit-on-blur."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..ports.picker import DatePickerHook
from .draft import DraftField


@dataclass
class DateField(DraftField[str]):
    """ISO date input committed to the form when it loses focus.

    Attributes:
        min: Earliest selectable date, passed to the control as a hint
        picker: Optional hook opening a native date picker on focus
    """

    min: Optional[str] = None
    picker: Optional[DatePickerHook] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self._logger = logging.getLogger(__name__)

    def prepare(self, draft: str) -> str:
        return draft

    def focus(self) -> None:
        super().focus()
        if self.picker is None:
            return
        try:
            self.picker()
        except Exception as e:
            self._logger.debug("Date picker unavailable", extra={"error": str(e)})
