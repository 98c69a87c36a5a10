"""
Session component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from share_app.domain.failures import AppFailure


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Cancel the timer. A no-op once fired or already cancelled."""
        ...


class TimerPort(Protocol):
    """Delayed callbacks delivered on the controller's event thread."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class WindowHostPort(Protocol):
    """Host window operations."""

    def show(self) -> None:
        ...

    def focus(self) -> None:
        ...

    def request_focus(self) -> None:
        """Route keyboard input back to the window's key listener."""
        ...

    def destroy(self) -> None:
        """Close the window and end the process."""
        ...


class UiSurfacePort(Protocol):
    """On-screen surface bound to the session."""

    def set_share_enabled(self, enabled: bool) -> None:
        ...

    def show_failure(self, failure: AppFailure) -> None:
        """Show a dismissible notice for ``failure``."""
        ...
