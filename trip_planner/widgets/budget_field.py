"""Budget entry field with commit-on-blur or Enter."""

from __future__ import annotations

from dataclasses import dataclass

from .draft import ENTER, DraftField


@dataclass
class BudgetField(DraftField[str]):
    """Numeric budget input.

    Commits the trimmed draft on blur, or immediately on Enter, which
    also releases focus. Whether the amount makes sense is left to the
    Validator.
    """

    def prepare(self, draft: str) -> str:
        return draft.strip()

    def key_down(self, key: str) -> bool:
        if key == ENTER:
            self.commit()
            self.focused = False
            return True
        return False
