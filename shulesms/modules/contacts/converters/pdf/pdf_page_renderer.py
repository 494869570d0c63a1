# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/pdf/pdf_page_renderer.py

PDF page rendering for the OCR fallback.
Single responsibility: converting PDF pages to PIL images at a given DPI.

Pages are rendered one at a time; the caller OCRs each image and releases
it before asking for the next, so at most one page raster is alive.

Author: ShuleSMS
Date: 2026-10-19
"""

import abc
import io
import logging
from typing import Optional

import fitz  # PyMuPDF
from PIL import Image

logger = logging.getLogger(__name__)

# Scanned contact lists are short; later pages are ignored
PDF_OCR_PAGE_LIMIT = 3


class PageRenderer(abc.ABC):
    """Capability: PDF bytes -> page images."""

    @abc.abstractmethod
    def get_page_count(self, content: bytes) -> int:
        ...

    @abc.abstractmethod
    def render_page(self, content: bytes, page_num: int) -> Optional[Image.Image]:
        """Render page `page_num` (0-indexed); None if it cannot be rendered."""


class PyMuPDFPageRenderer(PageRenderer):
    """
    Renders PDF pages with PyMuPDF.
    """

    def __init__(self, dpi: int = 200):
        self.dpi = dpi

    def get_page_count(self, content: bytes) -> int:
        try:
            with fitz.open(stream=content, filetype="pdf") as doc:
                return len(doc)
        except Exception as e:
            logger.error("Failed to get PDF page count: %s", e)
            return 0

    def render_page(self, content: bytes, page_num: int) -> Optional[Image.Image]:
        try:
            with fitz.open(stream=content, filetype="pdf") as doc:
                if page_num >= len(doc):
                    logger.error("Page %d out of range (max: %d)", page_num + 1, len(doc))
                    return None

                page = doc.load_page(page_num)

                # PyMuPDF default is 72 DPI
                zoom = self.dpi / 72.0
                pix = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom))
                image = Image.open(io.BytesIO(pix.tobytes("ppm")))
                image.load()

            logger.debug("[PAGE %d] Rendered at %d DPI, size: %s", page_num + 1, self.dpi, image.size)
            return image

        except Exception as e:
            logger.error("Failed to render PDF page %d: %s", page_num + 1, e)
            return None


__all__ = ["PDF_OCR_PAGE_LIMIT", "PageRenderer", "PyMuPDFPageRenderer"]
