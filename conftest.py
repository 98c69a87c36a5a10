from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from share_app.components.share.models import SharedFileRef
from share_app.domain.failures import AppFailure
from share_app.settings.loader import load_settings
from share_app.settings.models import AppSettings


class FakeTimer:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class FakeTimerPort:
    """Manual test clock. Nothing fires until advance() passes a due time."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now + delay_seconds, callback)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [t for t in self.timers if t.active and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = target

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.active]


class RecordingWindow:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def show(self) -> None:
        self.calls.append("show")

    def focus(self) -> None:
        self.calls.append("focus")

    def request_focus(self) -> None:
        self.calls.append("request_focus")

    def destroy(self) -> None:
        self.calls.append("destroy")

    @property
    def destroy_count(self) -> int:
        return self.calls.count("destroy")


class RecordingUi:
    def __init__(self) -> None:
        self.share_enabled: bool | None = None
        self.failures: list[AppFailure] = []

    def set_share_enabled(self, enabled: bool) -> None:
        self.share_enabled = enabled

    def show_failure(self, failure: AppFailure) -> None:
        self.failures.append(failure)


class RecordingSharePort:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[list[SharedFileRef], str]] = []
        self.error = error

    def share(self, files: Sequence[SharedFileRef], caption: str) -> None:
        self.calls.append((list(files), caption))
        if self.error is not None:
            raise self.error


class FakeWindow:
    """Stand-in for flet's page.window."""

    def __init__(self) -> None:
        self.centered = False
        self.destroy_calls = 0
        self.to_front_calls = 0
        self.visible = True
        self.focused = False
        self.on_event: Any = None

    def center(self) -> None:
        self.centered = True

    def to_front(self) -> None:
        self.to_front_calls += 1

    def destroy(self) -> None:
        self.destroy_calls += 1


class FakePage:
    """Stand-in for ft.Page recording updates and dialogs."""

    def __init__(self) -> None:
        self.window = FakeWindow()
        self.title = ""
        self.update_calls = 0
        self.opened: list[Any] = []
        self.closed: list[Any] = []
        self.on_keyboard_event: Any = None

    def update(self) -> None:
        self.update_calls += 1

    def open(self, control: Any) -> None:
        self.opened.append(control)

    def close(self, control: Any) -> None:
        self.closed.append(control)


@pytest.fixture
def timers() -> FakeTimerPort:
    return FakeTimerPort()


@pytest.fixture
def window() -> RecordingWindow:
    return RecordingWindow()


@pytest.fixture
def ui() -> RecordingUi:
    return RecordingUi()


@pytest.fixture
def share_port() -> RecordingSharePort:
    return RecordingSharePort()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def project_settings() -> AppSettings:
    """Settings from the settings.yaml shipped at the project root."""
    path = Path(__file__).parent / "settings.yaml"
    return load_settings(path)
