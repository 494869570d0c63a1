# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/text/__init__.py

Plain-text adapter: decodes uploaded bytes with unknown encoding and splits
the result into a line sequence.

Uploads come from phones and old office PCs (UTF-8, UTF-16 exports,
Windows-1252...), so the encoding is detected with charset-normalizer
instead of assuming UTF-8.

Author: ShuleSMS
Date: 2026-10-19
"""

import logging
from typing import Optional

from charset_normalizer import from_bytes

from ...errors import DecodeFailure
from ...services.contact_record import LineSequence

logger = logging.getLogger(__name__)


def decode_text(content: bytes, filename: Optional[str] = None) -> str:
    """
    Decodes bytes to text using the best detected encoding.

    Raises:
        DecodeFailure: if no plausible text encoding is found (binary data)
    """
    if not content:
        return ""

    best = from_bytes(content).best()
    if best is None:
        raise DecodeFailure("Content is not valid text in any known encoding", filename)

    logger.debug("Decoded %s as %s", filename or "<upload>", best.encoding)
    return str(best).lstrip("\ufeff")


def split_lines(text: str) -> LineSequence:
    """Trimmed, non-empty lines in source order."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_text_lines(content: bytes, filename: Optional[str] = None) -> LineSequence:
    return split_lines(decode_text(content, filename))


__all__ = ["decode_text", "split_lines", "read_text_lines"]
