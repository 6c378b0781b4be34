"""Encoding of per-sound numeric maps for persistent storage.

Volumes and intervals are stored as flat JSON objects (id -> number)
encoded as UTF-8 bytes. Decoding never raises: empty or corrupt data
yields an empty map so a damaged settings file cannot block startup.
"""

import json
import logging
import math
from collections.abc import Mapping

logger = logging.getLogger(__name__)


def encode_number_map(values: Mapping[str, float]) -> bytes:
    """Encode an id -> number map as a JSON byte blob.

    Args:
        values: Map to encode.

    Returns:
        UTF-8 encoded JSON object with sorted keys.
    """
    return json.dumps({str(k): float(v) for k, v in values.items()}, sort_keys=True).encode("utf-8")


def decode_number_map(data: bytes | bytearray | str | None) -> dict[str, float]:
    """Decode a JSON byte blob into an id -> number map.

    Entries whose value is not a finite number are dropped.

    Args:
        data: Blob produced by ``encode_number_map`` (or anything else).

    Returns:
        Decoded map, or an empty map if the blob is empty or invalid.
    """
    if not data:
        return {}

    try:
        payload = json.loads(data)
    except (TypeError, ValueError, UnicodeDecodeError) as e:
        logger.debug("Ignoring corrupt settings blob: %s", e)
        return {}

    if not isinstance(payload, dict):
        logger.debug("Ignoring settings blob of type %s", type(payload).__name__)
        return {}

    result: dict[str, float] = {}
    for key, value in payload.items():
        # bool is an int subclass but never a meaningful volume/interval
        if isinstance(value, bool) or not isinstance(value, int | float):
            continue
        if not math.isfinite(value):
            continue
        result[str(key)] = float(value)
    return result
