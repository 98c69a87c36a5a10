"""
Session component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from share_app.components.share.models import DEFAULT_CAPTION
from share_app.domain.entities import WINDOWS_SEPARATOR


class SessionState(str, Enum):
    IDLE = "idle"
    DECODING = "decoding"
    DECODE_FAILED = "decode_failed"
    SHARING = "sharing"
    SHARE_FAILED = "share_failed"
    MONITORING = "monitoring"
    CLOSING = "closing"
    TERMINATED = "terminated"


class CloseReason(str, Enum):
    DISMISS_KEY = "dismiss_key"
    BACKGROUND_TAP = "background_tap"
    WINDOW_CLOSE = "window_close"
    AUTO_CLOSE = "auto_close"
    DIALOG_DISMISSED = "dialog_dismissed"


@dataclass(frozen=True)
class SessionConfig:
    """Session timing configuration."""

    auto_close_seconds: float = 30.0
    settle_delay_seconds: float = 0.3
    share_caption: str = DEFAULT_CAPTION
    path_separator: str = WINDOWS_SEPARATOR


DEFAULT_CONFIG = SessionConfig()
