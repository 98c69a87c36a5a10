"""
Shareable file entity.

Built only by the argument decoder from validated payload items.
"""

from __future__ import annotations

from dataclasses import dataclass

WINDOWS_SEPARATOR = "\\"


@dataclass(frozen=True)
class ShareFile:
    """One file to hand to the OS share facility.

    ``directory`` holds the folder the file lives in; the file on disk is
    named after ``id`` with the extension taken from ``name``.
    """

    id: str
    name: str
    directory: str

    def __post_init__(self) -> None:
        for field_name in ("id", "name", "directory"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"ShareFile.{field_name} must be a non-empty string")

    @property
    def file_name(self) -> str:
        return self.name

    @property
    def extension(self) -> str:
        """Substring after the last dot of ``name``, empty when there is none."""
        parts = self.name.split(".")
        return parts[-1] if len(parts) > 1 else ""

    @property
    def full_path(self) -> str:
        return self.full_path_with(WINDOWS_SEPARATOR)

    def full_path_with(self, separator: str) -> str:
        return f"{self.directory}{separator}{self.id}.{self.extension}"

    def to_payload(self) -> dict[str, str]:
        return {"Id": self.id, "Name": self.name, "Path": self.directory}
