"""
Share component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from share_app.domain.entities import WINDOWS_SEPARATOR, ShareFile

DEFAULT_CAPTION = "Share App"


@dataclass(frozen=True)
class SharedFileRef:
    """External file reference handed to the OS share facility."""

    path: str
    display_name: str


@dataclass(frozen=True)
class ShareFilesInput:
    """Input for sharing a batch of files."""

    files: tuple[ShareFile, ...]
    caption: str = DEFAULT_CAPTION
    separator: str = WINDOWS_SEPARATOR
