"""
Share component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import SharedFileRef


class SharePort(Protocol):
    """OS share facility."""

    def share(self, files: Sequence[SharedFileRef], caption: str) -> None:
        """Open the native share UI for the whole batch. Raises on failure."""
        ...
