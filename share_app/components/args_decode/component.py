"""
Args decode component - turns the shell payload into ShareFile entities.

Invariants:
- Stages run in order and stop at the first failure
- Item order is preserved and duplicate ids are kept
- One malformed item fails the whole batch
- No I/O beyond logging
"""

from __future__ import annotations

import logging

from share_app.domain.result import Failure

from ._impl import decode_args, encode_args
from .models import DecodeArgsInput, DecodeResult, EncodeArgsInput

logger = logging.getLogger(__name__)


def run_decode(inp: DecodeArgsInput) -> DecodeResult:
    """
    Decode the raw argument string.

    Args:
        inp: Input containing the raw payload.

    Returns:
        Success with the decoded files, or Failure with the typed failure.
    """
    result = decode_args(inp.raw)

    if isinstance(result, Failure):
        logger.info("Decode failure: %s", result.message)
    else:
        logger.info("Successfully decoded %d file(s)", len(result.value))

    return result


def run_encode(inp: EncodeArgsInput) -> str:
    """Encode files into a shell payload."""
    return encode_args(inp.files)


def run(inp: DecodeArgsInput | EncodeArgsInput) -> DecodeResult | str:
    """Dispatch on input type."""
    if isinstance(inp, DecodeArgsInput):
        return run_decode(inp)
    return run_encode(inp)
