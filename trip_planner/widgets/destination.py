"""Tokenizing destination editor.

Users type destination names separated by commas. Each commit splits
the text on the delimiter, trims the pieces and drops empty ones before
handing them to the form, which skips names it already holds. Malformed
input is normalized away rather than rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .draft import BACKSPACE, ENTER, DraftField

DELIMITER = ","


def tokenize(text: str, delimiter: str = DELIMITER) -> List[str]:
    """Split delimiter-separated text into trimmed, non-empty tokens.

    Example:
        >>> tokenize(" Goa, , Jaipur ,")
        ['Goa', 'Jaipur']
    """
    return [part.strip() for part in text.split(delimiter) if part.strip()]


@dataclass
class DestinationEditor(DraftField[List[str]]):
    """Multi-value destination input.

    Commit triggers:
    1. Enter
    2. The delimiter key
    3. Pasting text that contains the delimiter (committed directly,
       without going through the draft)

    Backspace on an empty draft removes the most recently added
    destination.

    Attributes:
        on_remove_last: Called when Backspace hits an empty draft
        delimiter: Separator between destination names
    """

    on_remove_last: Optional[Callable[[], None]] = None
    delimiter: str = DELIMITER

    def prepare(self, draft: str) -> List[str]:
        return tokenize(draft, self.delimiter)

    def commit(self, raw: Optional[str] = None) -> None:
        """Commit ``raw`` if given, else the draft; always clears the draft."""
        tokens = self.prepare(self.draft if raw is None else raw)
        self.draft = ""
        if tokens:
            self.on_commit(tokens)

    def blur(self) -> None:
        # Leaving the field keeps the draft; only explicit triggers commit.
        self.focused = False

    def key_down(self, key: str) -> bool:
        if key in (ENTER, self.delimiter):
            self.commit()
            return True
        if key == BACKSPACE and not self.draft:
            if self.on_remove_last is not None:
                self.on_remove_last()
            return True
        return False

    def type_text(self, text: str) -> None:
        """Feed characters one keystroke at a time."""
        for char in text:
            if not self.key_down(char):
                self.draft += char

    def backspace(self) -> None:
        if not self.key_down(BACKSPACE):
            self.draft = self.draft[:-1]

    def paste(self, text: str) -> bool:
        """Handle a paste event.

        Returns:
            True if the pasted text was committed directly; otherwise the
            text is appended to the draft like an ordinary paste.
        """
        if not text:
            return False
        if self.delimiter in text:
            self.commit(text)
            return True
        self.draft += text
        return False
