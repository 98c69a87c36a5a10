"""
Session component - wires the decode and share components into a
SessionController.

Invariants:
- Only one of {fallback auto-close timer, focus monitor} is active
- Any failure is surfaced and ends in the fallback auto-close path
- Termination cancels every outstanding timer
"""

from __future__ import annotations

from share_app.components.args_decode import DecodeArgsInput, run_decode
from share_app.components.share import SharePort, ShareFilesInput, run_share
from share_app.domain.entities import ShareFile
from share_app.domain.result import Result

from ._impl import SessionController
from .models import DEFAULT_CONFIG, SessionConfig
from .ports import TimerPort, UiSurfacePort, WindowHostPort


def create_session_controller(
    *,
    window: WindowHostPort,
    timers: TimerPort,
    ui: UiSurfacePort,
    share_port: SharePort,
    config: SessionConfig = DEFAULT_CONFIG,
) -> SessionController:
    """
    Build a controller bound to the real decode and share components.

    Args:
        window: Host window port.
        timers: Timer port delivering callbacks on the event thread.
        ui: Surface that renders the Share button and failure notices.
        share_port: OS share facility port.
        config: Session timing configuration.

    Returns:
        An idle SessionController.
    """

    def decode(raw: str) -> Result[tuple[ShareFile, ...]]:
        return run_decode(DecodeArgsInput(raw=raw))

    def share(files: tuple[ShareFile, ...]) -> Result[None]:
        return run_share(
            ShareFilesInput(
                files=files,
                caption=config.share_caption,
                separator=config.path_separator,
            ),
            share_port=share_port,
        )

    return SessionController(
        window=window,
        timers=timers,
        ui=ui,
        decode=decode,
        share=share,
        config=config,
    )


def run(
    raw: str,
    *,
    window: WindowHostPort,
    timers: TimerPort,
    ui: UiSurfacePort,
    share_port: SharePort,
    config: SessionConfig = DEFAULT_CONFIG,
) -> SessionController:
    """Create a controller and start it with the raw payload."""
    controller = create_session_controller(
        window=window,
        timers=timers,
        ui=ui,
        share_port=share_port,
        config=config,
    )
    controller.start(raw)
    return controller
