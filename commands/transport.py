"""Base64 transport helpers for callers that ship image bytes as text."""

import base64
import binascii
import re

from engines.errors import CorruptData
from models.results import ProcessedImage

_DATA_URL_PREFIX = re.compile(r'^data:[^;,]*(;[^,]*)?,', re.IGNORECASE)


def decode_payload(text: str) -> bytes:
    """Decode base64 text, with or without a ``data:image/...;base64,`` prefix."""
    if not isinstance(text, str):
        raise CorruptData(f"Payload must be base64 text, got {type(text).__name__}")
    stripped = _DATA_URL_PREFIX.sub('', text.strip(), count=1)
    stripped = re.sub(r'\s+', '', stripped)
    try:
        return base64.b64decode(stripped, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CorruptData(f"Invalid base64 payload: {e}") from e


def encode_payload(data: bytes) -> str:
    return base64.b64encode(data).decode('ascii')


def to_data_url(image: ProcessedImage) -> str:
    """``data:`` URL suitable for an <img> element."""
    return f"data:{image.format.mime_type};base64,{encode_payload(image.data)}"
