# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/ocr/ocr_engine.py

OCR capability for the image adapter and the PDF fallback.

- TextRecognizer: abstract recognizer. Callers open one session per
  extraction call (``async with recognizer.session(): ...``); the session is
  closed on success and on failure.
- configure_tesseract: sets the tesseract binary path once at startup.
- TesseractRecognizer: pytesseract implementation. Recognition runs in a
  worker thread so the event loop is never blocked.

Every engine error surfaces as OcrFailure with the original cause chained.

Author: ShuleSMS
Date: 2026-10-19
"""

import abc
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import pytesseract
from PIL import Image

from ...config import ContactsConfig, get_contacts_config
from ...errors import OcrFailure

logger = logging.getLogger(__name__)


class TextRecognizer(abc.ABC):
    """Capability: image -> text."""

    async def open(self) -> None:
        """Acquire the engine. Raise OcrFailure if it cannot start."""

    async def close(self) -> None:
        """Release the engine."""

    @asynccontextmanager
    async def session(self) -> AsyncIterator["TextRecognizer"]:
        await self.open()
        try:
            yield self
        finally:
            await self.close()

    @abc.abstractmethod
    async def recognize(self, image: Image.Image) -> str:
        ...


def configure_tesseract(tesseract_cmd: Optional[str]) -> None:
    """
    Points pytesseract at an explicit tesseract binary.

    Called once at application startup; recognizers never write the
    pytesseract module global.
    """
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        logger.info("Tesseract binary set to %s", tesseract_cmd)


class TesseractRecognizer(TextRecognizer):
    """
    Tesseract OCR via pytesseract.

    Args:
        lang: Tesseract language pack(s), e.g. "eng" or "eng+swa"
    """

    def __init__(self, lang: str = "eng"):
        self.lang = lang

    @classmethod
    def from_config(cls, config: Optional[ContactsConfig] = None) -> "TesseractRecognizer":
        cfg = config or get_contacts_config()
        return cls(lang=cfg.ocr_lang)

    async def open(self) -> None:
        try:
            version = await asyncio.to_thread(pytesseract.get_tesseract_version)
        except pytesseract.TesseractNotFoundError as e:
            raise OcrFailure("Tesseract is not installed or not on PATH") from e
        logger.debug("Tesseract %s ready (lang=%s)", version, self.lang)

    async def recognize(self, image: Image.Image) -> str:
        try:
            return await asyncio.to_thread(pytesseract.image_to_string, image, lang=self.lang)
        except pytesseract.TesseractNotFoundError as e:
            raise OcrFailure("Tesseract is not installed or not on PATH") from e
        except (pytesseract.TesseractError, RuntimeError) as e:
            raise OcrFailure(f"Tesseract failed: {e}") from e


__all__ = ["TextRecognizer", "TesseractRecognizer", "configure_tesseract"]
