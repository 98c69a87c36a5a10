from typing import Any

import flet as ft

from share_app.domain.failures import AppFailure
from share_app.ui.theme import AppTheme

ICON_SIZE = 48
DIALOG_TITLE = "Error"
CLOSE_BUTTON_TEXT = "Close"


class ErrorModal(ft.AlertDialog):  # type: ignore
    """
    Modal notice for a failure. Closing it only hides the notice; the
    session's auto-close timer keeps running.
    """

    def __init__(
        self,
        page: Any,
        failure: AppFailure,
    ) -> None:
        super().__init__(
            modal=True,
            icon=ft.Icon(ft.Icons.ERROR_OUTLINE, color=AppTheme.error_color, size=ICON_SIZE),
            title=ft.Text(DIALOG_TITLE),
            content=ft.Text(failure.message),
        )
        self.app_page = page
        self.failure = failure
        self.actions = [ft.TextButton(CLOSE_BUTTON_TEXT, on_click=self.close_click)]

    def close_click(self, e: Any = None) -> None:
        self.app_page.close(self)
