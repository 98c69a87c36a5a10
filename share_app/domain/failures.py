"""
Failure taxonomy.

Every fallible operation in the app reports one of these values instead of
raising. A failure keeps only a rendered message, never the original
exception object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class AppFailure:
    """Base failure carrying a user-facing message."""

    kind: ClassVar[str] = "app"

    message: str
    code: str = "error"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class DecodeFailure(AppFailure):
    """Malformed transport encoding or document structure."""

    kind: ClassVar[str] = "decode"

    @classmethod
    def invalid_format(cls) -> DecodeFailure:
        return cls("Invalid argument format", code="invalid_format")

    @classmethod
    def base64_decode(cls) -> DecodeFailure:
        return cls("Failed to decode base64 arguments", code="base64_decode")

    @classmethod
    def json_parse(cls) -> DecodeFailure:
        return cls("Failed to parse JSON data", code="json_parse")

    @classmethod
    def error(cls, error: object) -> DecodeFailure:
        return cls(f"Error decoding args: {error}", code="decode_error")


@dataclass(frozen=True)
class JsonParseFailure(AppFailure):
    """Per-item schema violation inside ShareFilePaths."""

    kind: ClassVar[str] = "json_parse"

    @classmethod
    def missing_field(cls, field: str) -> JsonParseFailure:
        return cls(f"Missing required field: {field}", code="missing_field")

    @classmethod
    def invalid_type(cls, field: str, expected_type: str) -> JsonParseFailure:
        return cls(
            f"Invalid type for {field}, expected {expected_type}",
            code="invalid_type",
        )

    @classmethod
    def error(cls, error: object) -> JsonParseFailure:
        return cls(f"Error parsing JSON: {error}", code="parse_error")


@dataclass(frozen=True)
class ShareFailure(AppFailure):
    """The native share action failed."""

    kind: ClassVar[str] = "share"

    @classmethod
    def no_files(cls) -> ShareFailure:
        return cls("No files to share", code="no_files")

    @classmethod
    def error(cls, error: object) -> ShareFailure:
        return cls(f"Error sharing files: {error}", code="share_error")
