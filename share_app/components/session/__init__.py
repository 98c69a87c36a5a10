"""
Session component - lifecycle state machine for one share session.
"""

from ._impl import SessionController, can_transition
from .component import create_session_controller, run
from .models import DEFAULT_CONFIG, CloseReason, SessionConfig, SessionState
from .ports import TimerHandle, TimerPort, UiSurfacePort, WindowHostPort

__all__ = [
    # Entry points
    "create_session_controller",
    "run",
    # Controller
    "SessionController",
    "can_transition",
    # Models
    "DEFAULT_CONFIG",
    "CloseReason",
    "SessionConfig",
    "SessionState",
    # Ports
    "TimerHandle",
    "TimerPort",
    "UiSurfacePort",
    "WindowHostPort",
]
