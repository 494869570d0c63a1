# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/pdf

PDF adapter: text layer first, page rendering for the OCR fallback.
"""

from .pdf_page_renderer import PDF_OCR_PAGE_LIMIT, PageRenderer, PyMuPDFPageRenderer
from .pdf_text_extractor import extract_pdf_text

__all__ = [
    "PDF_OCR_PAGE_LIMIT",
    "PageRenderer",
    "PyMuPDFPageRenderer",
    "extract_pdf_text",
]
