"""
Args decode component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from share_app.domain.entities import ShareFile
from share_app.domain.result import Result

DecodeResult = Result[tuple[ShareFile, ...]]


@dataclass(frozen=True)
class DecodeArgsInput:
    """Input for decoding the shell payload."""

    raw: str


@dataclass(frozen=True)
class EncodeArgsInput:
    """Input for building a shell payload."""

    files: tuple[ShareFile, ...]
