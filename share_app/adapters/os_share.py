"""
Desktop share adapter.

Hands a batch of files to the platform file manager in a single launch,
with the first file highlighted where the file manager supports it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import click

from share_app.components.share.models import SharedFileRef

logger = logging.getLogger(__name__)

Launcher = Callable[..., Any]


class DesktopShareAdapter:
    """SharePort implementation backed by click.launch."""

    def __init__(self, launcher: Launcher | None = None) -> None:
        self._launcher = launcher or click.launch

    def share(self, files: Sequence[SharedFileRef], caption: str) -> None:
        if not files:
            raise ValueError("No files to share")

        target = files[0].path
        logger.info("%s: handing %d file(s) to the file manager", caption, len(files))
        if len(files) > 1:
            logger.info(
                "File manager highlights %s only; not shown: %s",
                target,
                ", ".join(f.path for f in files[1:]),
            )

        # click.launch returns the launcher's exit code; non-zero means it failed
        code = self._launcher(target, wait=False, locate=True)
        if code:
            raise OSError(f"Unable to open file manager for {target} (exit {code})")
