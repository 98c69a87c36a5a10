"""
Share component - hands decoded files to the OS share facility.

Invariants:
- An empty batch fails without touching the facility
- The facility is called once per batch, never once per file
- Success means the call was issued without raising; the outcome of the
  native dialog is not observable
"""

from __future__ import annotations

import logging

from share_app.domain.entities import WINDOWS_SEPARATOR, ShareFile
from share_app.domain.failures import ShareFailure
from share_app.domain.result import Failure, Result, Success

from .models import SharedFileRef, ShareFilesInput
from .ports import SharePort

logger = logging.getLogger(__name__)


def to_file_ref(file: ShareFile, separator: str = WINDOWS_SEPARATOR) -> SharedFileRef:
    return SharedFileRef(
        path=file.full_path_with(separator), display_name=file.file_name
    )


def run_share(inp: ShareFilesInput, *, share_port: SharePort) -> Result[None]:
    """
    Share a batch of files.

    Args:
        inp: Input containing the files and the share caption.
        share_port: OS share facility port.

    Returns:
        Success(None) once the facility accepted the batch, or Failure with
        a ShareFailure.
    """
    if not inp.files:
        return Failure(ShareFailure.no_files())

    refs = [to_file_ref(f, inp.separator) for f in inp.files]

    try:
        share_port.share(refs, inp.caption)
    except Exception as e:
        logger.info("Share failure: %s", e)
        return Failure(ShareFailure.error(e))

    logger.info("Successfully shared %d file(s)", len(refs))
    return Success(None)


def run(inp: ShareFilesInput, *, share_port: SharePort) -> Result[None]:
    """Main entry point."""
    return run_share(inp, share_port=share_port)
