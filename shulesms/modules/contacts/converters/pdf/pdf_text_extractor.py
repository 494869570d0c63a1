# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/pdf/pdf_text_extractor.py

Embedded text layer extraction with PyMuPDF.

Author: ShuleSMS
Date: 2026-10-19
"""

import logging
from typing import Optional

import fitz  # PyMuPDF

from ...errors import DecodeFailure

logger = logging.getLogger(__name__)


def extract_pdf_text(content: bytes, filename: Optional[str] = None) -> str:
    """
    Concatenated text layer of all pages ('' for scanned PDFs).

    Raises:
        DecodeFailure: corrupt or password-protected PDF
    """
    try:
        doc = fitz.open(stream=content, filetype="pdf")
    except Exception as e:
        raise DecodeFailure(f"Cannot open PDF: {e}", filename) from e

    try:
        if doc.needs_pass:
            raise DecodeFailure("PDF is password protected", filename)
        if doc.page_count == 0:
            raise DecodeFailure("PDF has no pages", filename)
        text = "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()

    logger.debug("PDF text layer for %s: %d chars", filename or "<upload>", len(text.strip()))
    return text


__all__ = ["extract_pdf_text"]
