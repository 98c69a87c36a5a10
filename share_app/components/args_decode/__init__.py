"""
Args decode component - shell payload to ShareFile entities.
"""

from ._impl import ITEM_FIELDS, ROOT_KEY, decode_args, encode_args, parse_item
from .component import run, run_decode, run_encode
from .models import DecodeArgsInput, DecodeResult, EncodeArgsInput

__all__ = [
    # Entry points
    "run",
    "run_decode",
    "run_encode",
    # Models
    "DecodeArgsInput",
    "DecodeResult",
    "EncodeArgsInput",
    # _impl re-exports
    "ITEM_FIELDS",
    "ROOT_KEY",
    "decode_args",
    "encode_args",
    "parse_item",
]
