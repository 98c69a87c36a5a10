"""
flet window host adapter.

Applies the window options at startup and implements WindowHostPort over
``page.window``.
"""

from __future__ import annotations

import logging
from typing import Any

from share_app.settings.models import WindowSettings

logger = logging.getLogger(__name__)


def configure_window(page: Any, settings: WindowSettings) -> None:
    """Small fixed-size helper window: no taskbar entry, no maximize/minimize."""
    window = page.window
    page.title = settings.title
    page.bgcolor = "transparent"
    page.padding = 0

    window.width = settings.width
    window.height = settings.height
    window.min_width = settings.width
    window.min_height = settings.height
    window.bgcolor = "transparent"
    window.frameless = settings.frameless
    window.title_bar_hidden = settings.frameless
    window.skip_task_bar = settings.skip_taskbar
    window.maximizable = False
    window.minimizable = False
    window.prevent_close = True
    window.visible = False

    if settings.center:
        window.center()
    page.update()


class FletWindowHost:
    """WindowHostPort implementation for a flet page."""

    def __init__(self, page: Any, focus_target: Any = None) -> None:
        self._page = page
        self._focus_target = focus_target
        self._destroyed = False

    def show(self) -> None:
        self._page.window.visible = True
        self._page.update()

    def focus(self) -> None:
        self._page.window.to_front()

    def request_focus(self) -> None:
        # Keyboard focus inside the page only; OS window focus is left alone
        if self._focus_target is not None:
            self._focus_target.focus()

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        logger.info("Destroying window")
        self._page.window.destroy()

    @property
    def destroyed(self) -> bool:
        return self._destroyed
