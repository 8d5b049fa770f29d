"""Navigation port - Screen rendering collaborator.

The navigation collaborator draws the active screen and may ask for a
direct jump to another screen. Rendering and transition animation are
entirely its business.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from ..domain.models import Screen


ScreenRequest = Callable[["Screen"], None]


class NavigationPort(Protocol):
    """Port for screen navigation."""

    def show(self, screen: Screen, request_change: ScreenRequest) -> None:
        """Display the active screen.

        Args:
            screen: The screen that is now active.
            request_change: Callback to request a jump to another screen.
        """
        ...
