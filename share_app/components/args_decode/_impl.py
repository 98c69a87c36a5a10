"""
Argument decode pipeline.

Strictly ordered and short-circuiting:
transport decode (base64) -> text decode (UTF-8) -> structural parse (JSON)
-> per-item validation. A single bad item fails the whole batch.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from collections.abc import Iterable
from typing import Any

from share_app.domain.entities import ShareFile
from share_app.domain.failures import DecodeFailure, JsonParseFailure
from share_app.domain.result import Failure, Result, Success

logger = logging.getLogger(__name__)

ROOT_KEY = "ShareFilePaths"
ITEM_FIELDS = ("Id", "Name", "Path")


def parse_item(item: Any) -> Result[ShareFile]:
    """Validate one ShareFilePaths item and build its entity."""
    if not isinstance(item, dict):
        return Failure(JsonParseFailure.invalid_type(f"{ROOT_KEY} item", "Map"))

    try:
        values: list[str] = []
        for field in ITEM_FIELDS:
            value = item.get(field)
            # null, wrong type and empty string are all reported as missing
            if not isinstance(value, str) or not value:
                return Failure(JsonParseFailure.missing_field(field))
            values.append(value)

        file_id, name, directory = values
        return Success(ShareFile(id=file_id, name=name, directory=directory))
    except Exception as e:
        return Failure(JsonParseFailure.error(e))


def decode_args(raw: str) -> Result[tuple[ShareFile, ...]]:
    """
    Decode the shell payload into an ordered tuple of ShareFile.

    Args:
        raw: base64 of UTF-8 JSON ``{"ShareFilePaths": [{Id, Name, Path}, ...]}``

    Returns:
        Success with the files in input order (duplicates kept), or the
        failure of the first stage that rejected the input.
    """
    if not raw:
        return Failure(DecodeFailure.invalid_format())

    try:
        data = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError):
        return Failure(DecodeFailure.base64_decode())

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        return Failure(DecodeFailure.error(e))

    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        return Failure(DecodeFailure.json_parse())

    try:
        if not isinstance(document, dict):
            return Failure(DecodeFailure.json_parse())

        items = document.get(ROOT_KEY)
        if not isinstance(items, list) or not items:
            return Failure(DecodeFailure.json_parse())

        files: list[ShareFile] = []
        for item in items:
            parsed = parse_item(item)
            if isinstance(parsed, Failure):
                return parsed
            files.append(parsed.value)

        return Success(tuple(files))
    except Exception as e:
        return Failure(DecodeFailure.error(e))


def encode_args(files: Iterable[ShareFile]) -> str:
    """Build the shell payload for ``files``; inverse of :func:`decode_args`."""
    document = {ROOT_KEY: [f.to_payload() for f in files]}
    text = json.dumps(document, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
