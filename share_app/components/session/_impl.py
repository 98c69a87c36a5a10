"""
SessionController - decode, share, focus monitoring and auto-close.

States:
    idle -> decoding -> (decode_failed | sharing)
    sharing -> (share_failed | monitoring)
    decode_failed | share_failed -> closing
    any -> terminated

Key behaviors:
- Every failure is surfaced and arms the fallback auto-close timer
- A successful share cancels the fallback timer and starts focus monitoring
- A blur followed by a focus while monitoring means the native dialog was
  dismissed, and the session terminates
- Termination happens once; it cancels every outstanding timer
- Events after termination are ignored

All entry points must be called from one event thread; the controller holds
no locks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from share_app.domain.entities import ShareFile
from share_app.domain.failures import AppFailure
from share_app.domain.result import Failure, Result, Success

from .models import DEFAULT_CONFIG, CloseReason, SessionConfig, SessionState
from .ports import TimerHandle, TimerPort, UiSurfacePort, WindowHostPort

logger = logging.getLogger(__name__)

DecodeFn = Callable[[str], Result[tuple[ShareFile, ...]]]
ShareFn = Callable[[tuple[ShareFile, ...]], Result[None]]

_ALLOWED: dict[SessionState, frozenset[SessionState]] = {
    SessionState.IDLE: frozenset({SessionState.DECODING}),
    SessionState.DECODING: frozenset(
        {SessionState.DECODE_FAILED, SessionState.SHARING}
    ),
    SessionState.DECODE_FAILED: frozenset({SessionState.CLOSING}),
    SessionState.SHARING: frozenset(
        {SessionState.SHARE_FAILED, SessionState.MONITORING}
    ),
    SessionState.SHARE_FAILED: frozenset({SessionState.CLOSING}),
    # The Share button can start another attempt
    SessionState.MONITORING: frozenset({SessionState.SHARING}),
    SessionState.CLOSING: frozenset({SessionState.SHARING}),
    SessionState.TERMINATED: frozenset(),
}


def can_transition(current: SessionState, new: SessionState) -> bool:
    """Termination is reachable from every live state."""
    if new is SessionState.TERMINATED:
        return current is not SessionState.TERMINATED
    return new in _ALLOWED[current]


class SessionController:
    """
    Drives one decode-and-share session.

    Collaborators are injected so the state machine runs without a real
    window or clock.
    """

    def __init__(
        self,
        *,
        window: WindowHostPort,
        timers: TimerPort,
        ui: UiSurfacePort,
        decode: DecodeFn,
        share: ShareFn,
        config: SessionConfig = DEFAULT_CONFIG,
    ) -> None:
        self._window = window
        self._timers = timers
        self._ui = ui
        self._decode = decode
        self._share = share
        self._config = config

        self._state = SessionState.IDLE
        self._history: list[SessionState] = [SessionState.IDLE]
        self._decode_result: Result[tuple[ShareFile, ...]] | None = None
        self._close_reason: CloseReason | None = None

        self._fallback_timer: TimerHandle | None = None
        self._settle_timer: TimerHandle | None = None

        self._is_monitoring = False
        self._has_lost_focus = False

    # --- Read-only views ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def history(self) -> tuple[SessionState, ...]:
        return tuple(self._history)

    @property
    def decode_result(self) -> Result[tuple[ShareFile, ...]] | None:
        return self._decode_result

    @property
    def is_monitoring(self) -> bool:
        return self._is_monitoring

    @property
    def has_lost_focus(self) -> bool:
        return self._has_lost_focus

    @property
    def terminated(self) -> bool:
        return self._state is SessionState.TERMINATED

    @property
    def close_reason(self) -> CloseReason | None:
        return self._close_reason

    @property
    def fallback_armed(self) -> bool:
        return self._fallback_timer is not None

    # --- Events ---

    def start(self, raw: str) -> None:
        """Process start: show the window and decode the payload."""
        if self._state is not SessionState.IDLE:
            logger.warning("Session already started (state=%s)", self._state.value)
            return

        self._transition(SessionState.DECODING)
        self._window.show()
        self._window.focus()

        result = self._decode(raw)
        self._decode_result = result
        self._ui.set_share_enabled(isinstance(result, Success))

        if isinstance(result, Failure):
            self._fail(SessionState.DECODE_FAILED, result.failure)
            return

        self._begin_sharing(result.value)

    def request_share(self) -> bool:
        """
        Share button pressed.

        Returns:
            True if a new share attempt was scheduled.
        """
        result = self._decode_result
        if self.terminated or not isinstance(result, Success):
            return False
        if self._state is SessionState.SHARING:
            return False

        self._stop_monitoring()
        self._begin_sharing(result.value)
        return True

    def on_window_blur(self) -> None:
        if self.terminated or not self._is_monitoring:
            return
        self._has_lost_focus = True
        logger.debug("Window lost focus while monitoring")

    def on_window_focus(self) -> None:
        if self.terminated:
            return
        if self._is_monitoring and self._has_lost_focus:
            self._stop_monitoring()
            self.terminate(CloseReason.DIALOG_DISMISSED)

    def request_close(self, reason: CloseReason = CloseReason.DISMISS_KEY) -> None:
        """Explicit close; bypasses every timer."""
        self.terminate(reason)

    def terminate(self, reason: CloseReason) -> None:
        if self.terminated:
            return

        self._cancel_settle()
        self._cancel_fallback()
        self._stop_monitoring()
        self._close_reason = reason
        self._transition(SessionState.TERMINATED)
        logger.info("Closing session (%s)", reason.value)
        self._window.destroy()

    # --- Internals ---

    def _transition(self, new: SessionState) -> None:
        if not can_transition(self._state, new):
            raise ValueError(
                f"Invalid transition from {self._state.value} to {new.value}"
            )
        logger.debug("Session %s -> %s", self._state.value, new.value)
        self._state = new
        self._history.append(new)

    def _begin_sharing(self, files: tuple[ShareFile, ...]) -> None:
        self._transition(SessionState.SHARING)
        if self._fallback_timer is None:
            self._arm_fallback()

        self._cancel_settle()
        self._settle_timer = self._timers.call_later(
            self._config.settle_delay_seconds,
            lambda: self._on_settled(files),
        )

    def _on_settled(self, files: tuple[ShareFile, ...]) -> None:
        self._settle_timer = None
        if self._state is not SessionState.SHARING:
            return

        result = self._share(files)
        if isinstance(result, Failure):
            self._fail(SessionState.SHARE_FAILED, result.failure)
            return

        self._begin_monitoring()

    def _begin_monitoring(self) -> None:
        self._cancel_fallback()
        self._transition(SessionState.MONITORING)
        self._is_monitoring = True
        self._has_lost_focus = False
        self._window.request_focus()

    def _stop_monitoring(self) -> None:
        self._is_monitoring = False
        self._has_lost_focus = False

    def _fail(self, state: SessionState, failure: AppFailure) -> None:
        self._transition(state)
        logger.info("%s: %s", state.value, failure.message)
        self._ui.show_failure(failure)

        self._stop_monitoring()
        self._cancel_fallback()
        self._arm_fallback()
        self._transition(SessionState.CLOSING)

    def _arm_fallback(self) -> None:
        self._fallback_timer = self._timers.call_later(
            self._config.auto_close_seconds, self._on_fallback_expired
        )

    def _on_fallback_expired(self) -> None:
        self._fallback_timer = None
        self.terminate(CloseReason.AUTO_CLOSE)

    def _cancel_fallback(self) -> None:
        if self._fallback_timer is not None:
            self._fallback_timer.cancel()
            self._fallback_timer = None

    def _cancel_settle(self) -> None:
        if self._settle_timer is not None:
            self._settle_timer.cancel()
            self._settle_timer = None
