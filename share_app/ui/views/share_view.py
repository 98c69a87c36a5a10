import logging
from collections.abc import Callable
from typing import Any

import flet as ft

from share_app.components.session.models import CloseReason
from share_app.domain.failures import AppFailure
from share_app.ui.theme import AppTheme
from share_app.ui.widgets.error_modal import ErrorModal

logger = logging.getLogger(__name__)

SHARE_BUTTON_TEXT = "Share"


class ShareView(ft.Container):  # type: ignore
    """
    The whole window: a translucent backdrop that closes on tap, with a
    single Share button in the middle.

    Also acts as the session's UI surface (set_share_enabled/show_failure).
    """

    def __init__(
        self,
        page: Any,
        on_share: Callable[[], None],
        on_close: Callable[[CloseReason], None],
        background_color: str = AppTheme.backdrop_color,
        border_radius: float = AppTheme.border_radius,
    ) -> None:
        super().__init__(expand=True)
        self.app_page = page
        self._on_share = on_share
        self._on_close = on_close
        self.error_modal: ErrorModal | None = None

        self.share_button = ft.ElevatedButton(
            SHARE_BUTTON_TEXT, on_click=self.share_click, disabled=True
        )

        self.bgcolor = background_color
        self.border_radius = border_radius
        self.alignment = ft.alignment.center
        self.content = self.share_button
        self.on_click = self.background_click

    # --- Control events ---

    def share_click(self, e: Any = None) -> None:
        self._on_share()

    def background_click(self, e: Any = None) -> None:
        self._on_close(CloseReason.BACKGROUND_TAP)

    # --- UiSurfacePort ---

    def set_share_enabled(self, enabled: bool) -> None:
        self.share_button.disabled = not enabled
        self.app_page.update()

    def show_failure(self, failure: AppFailure) -> None:
        logger.info("Showing failure notice: %s", failure.message)
        self.error_modal = ErrorModal(self.app_page, failure)
        self.app_page.open(self.error_modal)
