"""
Session component unit tests.

Drives the SessionController with the shared manual clock and recording
ports from the root conftest.
"""

from __future__ import annotations

import pytest

from share_app.components.session import (
    CloseReason,
    SessionConfig,
    SessionController,
    SessionState,
    can_transition,
)
from share_app.components.session.ports import TimerPort, UiSurfacePort, WindowHostPort
from share_app.domain.entities import ShareFile
from share_app.domain.failures import DecodeFailure, ShareFailure
from share_app.domain.result import Failure, Result, Success

FILES = (ShareFile(id="a1", name="pic.jpg", directory="C:\\tmp"),)
CONFIG = SessionConfig(auto_close_seconds=30.0, settle_delay_seconds=0.3)

# --- Mock Implementations ---


class MockShare:
    def __init__(self, results: list[Result[None]] | None = None) -> None:
        self.calls: list[tuple[ShareFile, ...]] = []
        self._results = results or []

    def __call__(self, files: tuple[ShareFile, ...]) -> Result[None]:
        self.calls.append(files)
        if self._results:
            return self._results.pop(0)
        return Success(None)


def make_controller(
    window: WindowHostPort,
    timers: TimerPort,
    ui: UiSurfacePort,
    *,
    decode_result: Result[tuple[ShareFile, ...]] | None = None,
    share: MockShare | None = None,
) -> SessionController:
    result = decode_result if decode_result is not None else Success(FILES)
    return SessionController(
        window=window,
        timers=timers,
        ui=ui,
        decode=lambda raw: result,
        share=share or MockShare(),
        config=CONFIG,
    )


# --- Transition table ---


class TestTransitions:
    def test_terminated_reachable_from_live_states(self) -> None:
        for state in SessionState:
            if state is SessionState.TERMINATED:
                continue
            assert can_transition(state, SessionState.TERMINATED)

    def test_terminated_is_final(self) -> None:
        for state in SessionState:
            assert not can_transition(SessionState.TERMINATED, state)

    def test_idle_cannot_skip_decoding(self) -> None:
        assert not can_transition(SessionState.IDLE, SessionState.SHARING)


# --- Decode path ---


class TestStart:
    def test_shows_and_focuses_window(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")

        assert window.calls[:2] == ["show", "focus"]

    def test_decode_failure_surfaces_and_arms_fallback(self, window, timers, ui) -> None:
        share = MockShare()
        controller = make_controller(
            window, timers, ui,
            decode_result=Failure(DecodeFailure.invalid_format()),
            share=share,
        )
        controller.start("")

        assert controller.history == (
            SessionState.IDLE,
            SessionState.DECODING,
            SessionState.DECODE_FAILED,
            SessionState.CLOSING,
        )
        assert ui.failures == [DecodeFailure.invalid_format()]
        assert ui.share_enabled is False
        assert controller.fallback_armed
        assert share.calls == []

    def test_decode_failure_auto_closes(self, window, timers, ui) -> None:
        controller = make_controller(
            window, timers, ui, decode_result=Failure(DecodeFailure.json_parse())
        )
        controller.start("x")

        timers.advance(29.9)
        assert not controller.terminated

        timers.advance(0.2)
        assert controller.terminated
        assert controller.close_reason is CloseReason.AUTO_CLOSE
        assert window.destroy_count == 1

    def test_exposes_decode_result(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        assert controller.decode_result is None

        controller.start("payload")

        assert controller.decode_result == Success(FILES)
        assert ui.share_enabled is True

    def test_second_start_ignored(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")
        controller.start("payload")

        assert controller.history.count(SessionState.DECODING) == 1


# --- Share path ---


class TestSharing:
    def test_share_waits_for_settle_delay(self, window, timers, ui) -> None:
        share = MockShare()
        controller = make_controller(window, timers, ui, share=share)
        controller.start("payload")

        assert controller.state is SessionState.SHARING
        assert share.calls == []

        timers.advance(0.3)
        assert share.calls == [FILES]

    def test_success_enters_monitoring_and_cancels_fallback(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")
        assert controller.fallback_armed

        timers.advance(0.3)

        assert controller.state is SessionState.MONITORING
        assert controller.is_monitoring
        assert not controller.fallback_armed
        assert timers.pending == []
        assert "request_focus" in window.calls

    def test_cancelled_fallback_never_fires(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")
        timers.advance(0.3)

        timers.advance(120)

        assert not controller.terminated
        assert window.destroy_count == 0

    def test_share_failure_surfaces_and_rearms_fallback(self, window, timers, ui) -> None:
        failure = ShareFailure.error("boom")
        controller = make_controller(
            window, timers, ui, share=MockShare([Failure(failure)])
        )
        controller.start("payload")
        timers.advance(10)

        assert controller.state is SessionState.CLOSING
        assert SessionState.SHARE_FAILED in controller.history
        assert ui.failures == [failure]
        assert not controller.is_monitoring

        # Re-armed with a full duration at the failure time (t=0.3)
        timers.advance(20.2)
        assert not controller.terminated
        timers.advance(0.2)
        assert controller.terminated
        assert controller.close_reason is CloseReason.AUTO_CLOSE

    def test_close_during_settle_skips_share(self, window, timers, ui) -> None:
        share = MockShare()
        controller = make_controller(window, timers, ui, share=share)
        controller.start("payload")
        controller.request_close()

        timers.advance(60)

        assert share.calls == []
        assert window.destroy_count == 1


# --- Focus-loss monitor ---


class TestFocusMonitor:
    @pytest.fixture
    def monitoring(self, window, timers, ui) -> SessionController:
        controller = make_controller(window, timers, ui)
        controller.start("payload")
        timers.advance(0.3)
        assert controller.state is SessionState.MONITORING
        return controller

    def test_blur_then_focus_terminates_once(self, monitoring, window) -> None:
        monitoring.on_window_blur()
        assert monitoring.has_lost_focus

        monitoring.on_window_focus()
        monitoring.on_window_focus()

        assert monitoring.terminated
        assert monitoring.close_reason is CloseReason.DIALOG_DISMISSED
        assert window.destroy_count == 1

    def test_focus_without_blur_is_ignored(self, monitoring, window) -> None:
        monitoring.on_window_focus()

        assert not monitoring.terminated
        assert window.destroy_count == 0

    def test_blur_churn_then_focus(self, monitoring) -> None:
        monitoring.on_window_blur()
        monitoring.on_window_blur()
        monitoring.on_window_focus()

        assert monitoring.terminated

    def test_focus_events_ignored_before_monitoring(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")

        controller.on_window_blur()
        controller.on_window_focus()

        assert not controller.has_lost_focus
        assert not controller.terminated

    def test_blur_before_monitoring_does_not_count(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")
        controller.on_window_blur()
        timers.advance(0.3)

        controller.on_window_focus()

        assert not controller.terminated


# --- Explicit close and Share button ---


class TestExplicitActions:
    @pytest.mark.parametrize(
        "reason", [CloseReason.DISMISS_KEY, CloseReason.BACKGROUND_TAP]
    )
    def test_close_cancels_all_timers(self, window, timers, ui, reason) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")
        controller.request_close(reason)

        assert controller.terminated
        assert controller.close_reason is reason
        assert timers.pending == []

    def test_close_from_idle(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.request_close()

        assert controller.history == (SessionState.IDLE, SessionState.TERMINATED)

    def test_events_after_termination_ignored(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")
        controller.request_close()

        controller.request_close()
        controller.on_window_blur()
        controller.on_window_focus()

        assert controller.request_share() is False
        assert window.destroy_count == 1

    def test_share_button_after_monitoring(self, window, timers, ui) -> None:
        share = MockShare()
        controller = make_controller(window, timers, ui, share=share)
        controller.start("payload")
        timers.advance(0.3)

        assert controller.request_share() is True
        assert controller.state is SessionState.SHARING
        assert not controller.is_monitoring
        assert controller.fallback_armed

        timers.advance(0.3)
        assert len(share.calls) == 2
        assert controller.state is SessionState.MONITORING

    def test_share_button_while_sharing_is_ignored(self, window, timers, ui) -> None:
        controller = make_controller(window, timers, ui)
        controller.start("payload")

        assert controller.request_share() is False

    def test_share_button_disabled_after_decode_failure(self, window, timers, ui) -> None:
        controller = make_controller(
            window, timers, ui, decode_result=Failure(DecodeFailure.base64_decode())
        )
        controller.start("payload")

        assert controller.request_share() is False
        assert controller.state is SessionState.CLOSING

    def test_share_button_retries_after_share_failure(self, window, timers, ui) -> None:
        share = MockShare([Failure(ShareFailure.error("x"))])
        controller = make_controller(window, timers, ui, share=share)
        controller.start("payload")
        timers.advance(0.3)
        assert controller.state is SessionState.CLOSING

        assert controller.request_share() is True
        timers.advance(0.3)

        assert controller.state is SessionState.MONITORING
        assert not controller.fallback_armed
