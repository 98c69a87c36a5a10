import logging
import sys
from collections.abc import Callable
from typing import Any

import flet as ft

from share_app.adapters.flet_window import FletWindowHost, configure_window
from share_app.adapters.os_share import DesktopShareAdapter
from share_app.adapters.timers import SerialDispatcher, ThreadingTimerPort
from share_app.app_shell.config import configure_logging, resolve_settings, session_config
from share_app.components.session import (
    CloseReason,
    SessionController,
    create_session_controller,
)
from share_app.settings.models import AppSettings
from share_app.ui.theme import AppTheme
from share_app.ui.views.share_view import ShareView

logger = logging.getLogger(__name__)


def join_args(argv: list[str]) -> str:
    """The shell may split the payload; its parts are concatenated."""
    return "".join(argv)


def bind_window_events(
    page: Any, controller: SessionController, dispatcher: SerialDispatcher
) -> None:
    """Feed window focus/blur/close and key presses to the controller."""

    def on_window_event(e: Any) -> None:
        event = str(e.data)
        if event == "blur":
            dispatcher.post(controller.on_window_blur)
        elif event == "focus":
            dispatcher.post(controller.on_window_focus)
        elif event == "close":
            dispatcher.post(lambda: controller.request_close(CloseReason.WINDOW_CLOSE))

    def on_keyboard(e: Any) -> None:
        dispatcher.post(lambda: controller.request_close(CloseReason.DISMISS_KEY))

    page.window.on_event = on_window_event
    page.on_keyboard_event = on_keyboard


def build_app(raw: str, settings: AppSettings) -> Callable[[ft.Page], None]:
    def main(page: ft.Page) -> None:
        # 0. Theme and window
        page.theme = AppTheme.light_theme()
        page.theme_mode = ft.ThemeMode.LIGHT
        configure_window(page, settings.window)

        # 1. Event thread
        dispatcher = SerialDispatcher()
        dispatcher.start()

        controller: SessionController

        def handle_share() -> None:
            dispatcher.post(lambda: controller.request_share())

        def handle_close(reason: CloseReason) -> None:
            dispatcher.post(lambda: controller.request_close(reason))

        # 2. View
        view = ShareView(
            page,
            on_share=handle_share,
            on_close=handle_close,
            background_color=settings.window.background_color,
            border_radius=settings.window.border_radius,
        )
        page.add(view)

        # 3. Session
        controller = create_session_controller(
            window=FletWindowHost(page, focus_target=view.share_button),
            timers=ThreadingTimerPort(dispatcher),
            ui=view,
            share_port=DesktopShareAdapter(),
            config=session_config(settings),
        )
        bind_window_events(page, controller, dispatcher)

        dispatcher.post(lambda: controller.start(raw))

    return main


def run(argv: list[str] | None = None) -> int:
    raw = join_args(sys.argv[1:] if argv is None else argv)

    try:
        settings = resolve_settings()
    except (FileNotFoundError, ValueError) as e:
        print(f"CRITICAL: {e}", file=sys.stderr)
        return 1

    configure_logging(settings)
    logger.info("Starting Share App (%d payload chars)", len(raw))

    ft.app(target=build_app(raw, settings))
    return 0


if __name__ == "__main__":
    sys.exit(run())
