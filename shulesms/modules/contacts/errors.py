# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/errors.py

Domain errors for contact extraction.

Goal:
- Define semantic exceptions that adapters and the orchestrator raise.
- Let routes (or any client module) translate them into HTTP responses
  without coupling the pipeline to FastAPI.

An empty extraction result is NOT an error.

Author: ShuleSMS
Date: 2026-10-19
"""

from __future__ import annotations

from typing import Optional


class ContactExtractionError(Exception):
    """
    Base error for the contacts extraction pipeline.
    """

    kind = "extraction_error"

    def __init__(self, message: str, filename: Optional[str] = None) -> None:
        super().__init__(message)
        self.filename = filename


class UnsupportedFormat(ContactExtractionError):
    """
    The container type is not recognized by any adapter.
    Fatal for the call, no partial result.
    """

    kind = "unsupported_format"

    def __init__(
        self,
        message: str = "Unsupported file type",
        filename: Optional[str] = None,
        media_type: Optional[str] = None,
    ) -> None:
        super().__init__(message, filename)
        self.media_type = media_type


class DecodeFailure(ContactExtractionError):
    """
    The container could not be parsed (corrupt workbook, unreadable document).
    Fatal; the original cause is chained via ``raise ... from exc``.
    """

    kind = "decode_failure"

    def __init__(self, message: str = "Could not decode file", filename: Optional[str] = None) -> None:
        super().__init__(message, filename)


class OcrFailure(ContactExtractionError):
    """
    The OCR engine failed to initialize or to recognize text.
    Degrades the PDF fallback only; fatal for images.
    """

    kind = "ocr_failure"

    def __init__(self, message: str = "OCR failed", filename: Optional[str] = None) -> None:
        super().__init__(message, filename)


__all__ = [
    "ContactExtractionError",
    "UnsupportedFormat",
    "DecodeFailure",
    "OcrFailure",
]
