#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/utils/encoding.py
"""Turn byte input into text before it reaches the lenient parser.

Documents exported from layout applications are usually UTF-8, but text
frames copied out of older tools can arrive in a legacy code page. Bytes are
decoded with the package's own UTF-8 codec first, then with the encoding
chardet detects, then with the fallback encodings.
"""

from __future__ import annotations

import logging
from typing import IO, Sequence

import chardet

from textbridge.codecs.utf8 import decode_utf8
from textbridge.constants import (
    DEFAULT_CHARDET_CONFIDENCE,
    DEFAULT_CHARDET_SAMPLE_SIZE,
    FALLBACK_ENCODINGS,
)

logger = logging.getLogger(__name__)

_UTF8_BOM = b"\xef\xbb\xbf"


def detect_encoding(
    data: bytes,
    sample_size: int = DEFAULT_CHARDET_SAMPLE_SIZE,
    confidence_threshold: float = DEFAULT_CHARDET_CONFIDENCE,
) -> str | None:
    """Detect the character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes to sample
    confidence_threshold : float, default 0.7
        Minimum confidence (0.0-1.0) required to trust the detection

    Returns
    -------
    str | None
        Detected encoding name, or None if nothing was detected with enough
        confidence

    """
    if not data:
        return None

    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None

    return encoding


def read_text(
    data: bytes,
    fallback_encodings: Sequence[str] = FALLBACK_ENCODINGS,
    use_chardet: bool = True,
) -> str:
    """Decode binary data to text.

    Attempts, in order:
    1. The UTF-8 codec (after dropping a UTF-8 byte order mark)
    2. chardet-based detection (if enabled)
    3. Fallback encodings in order
    4. UTF-8 with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : sequence of str, default ("utf-8", "latin-1")
        Encodings to try after detection
    use_chardet : bool, default True
        Whether to attempt chardet-based detection

    Returns
    -------
    str
        Decoded text content

    """
    payload = data[len(_UTF8_BOM) :] if data.startswith(_UTF8_BOM) else data

    text = decode_utf8(payload)
    if text is not None:
        return text

    if use_chardet:
        detected = detect_encoding(payload)
        if detected:
            try:
                text = payload.decode(detected)
                logger.debug(f"Decoded with chardet-detected encoding: {detected}")
                return text
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug(f"Failed to decode with chardet-detected encoding {detected}: {e}")

    for encoding in fallback_encodings:
        try:
            text = payload.decode(encoding)
            logger.debug(f"Decoded with fallback encoding: {encoding}")
            return text
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return payload.decode("utf-8", errors="replace")


def read_stream_text(stream: IO[bytes] | IO[str]) -> str:
    """Read a binary or text stream and return its content as text."""
    content = stream.read()
    if isinstance(content, bytes):
        return read_text(content)
    return content
