"""Draft/commit input abstraction.

A DraftField keeps what the user is typing in a local draft, separate
from the authoritative value held by the form. Only an explicit commit
hands the prepared draft to the ``on_commit`` callback, so partially
typed values never reach validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

ENTER = "Enter"
BACKSPACE = "Backspace"


@dataclass
class DraftField(Generic[T]):
    """Local draft plus commit callback.

    Subclasses decide what a commit delivers by overriding ``prepare``
    and which keystrokes trigger one by overriding ``key_down``.

    Attributes:
        on_commit: Receives the prepared draft on every commit
        value: Last authoritative value seen by the widget
        draft: Text currently in the input
        focused: Whether the input currently has focus
    """

    on_commit: Callable[[T], None]
    value: str = ""
    draft: str = field(init=False)
    focused: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.draft = self.value

    def prepare(self, draft: str) -> T:
        """Turn the draft into the committed value."""
        raise NotImplementedError

    def sync(self, value: str) -> None:
        """Adopt a new authoritative value.

        The draft is overwritten only when the value actually changed,
        so re-rendering with the same value keeps what the user typed.
        """
        if value != self.value:
            self.value = value
            self.draft = value

    def edit(self, text: str) -> None:
        """Replace the draft, as a change event on the input does."""
        self.draft = text

    def key_down(self, key: str) -> bool:
        """Handle a keystroke; return True if the default was suppressed."""
        return False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False
        self.commit()

    def commit(self) -> None:
        self.on_commit(self.prepare(self.draft))
