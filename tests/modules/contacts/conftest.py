# -*- coding: utf-8 -*-
"""
tests/modules/contacts/conftest.py

Fixtures for the contacts module:
- Fake OCR recognizer and PDF page renderer (no Tesseract needed).
- In-memory fixture documents: CSV, XLSX (openpyxl), DOCX (python-docx),
  PDF (PyMuPDF) and PNG (Pillow).
"""

import io
from typing import Iterable, List, Optional, Sequence

import fitz  # PyMuPDF
import pytest
from docx import Document
from openpyxl import Workbook
from PIL import Image

from shulesms.modules.contacts.converters.ocr import TextRecognizer
from shulesms.modules.contacts.converters.pdf import PageRenderer
from shulesms.modules.contacts.errors import OcrFailure


# -----------------------------------------------------------------------------
# OCR / rendering fakes
# -----------------------------------------------------------------------------
class FakeRecognizer(TextRecognizer):
    """Returns canned texts in order; records session lifecycle."""

    def __init__(self, texts: Sequence[str] = (), fail_on_open: bool = False, fail_on_recognize: bool = False):
        self.texts = list(texts)
        self.fail_on_open = fail_on_open
        self.fail_on_recognize = fail_on_recognize
        self.opened = 0
        self.closed = 0
        self.images: List[tuple] = []

    async def open(self) -> None:
        if self.fail_on_open:
            raise OcrFailure("engine unavailable")
        self.opened += 1

    async def close(self) -> None:
        self.closed += 1

    async def recognize(self, image: Image.Image) -> str:
        self.images.append(image.size)
        if self.fail_on_recognize:
            raise OcrFailure("recognition failed")
        return self.texts.pop(0) if self.texts else ""


class FakeRenderer(PageRenderer):
    """Pretends the PDF has `page_count` pages, each a small white image."""

    def __init__(self, page_count: int = 1, size=(200, 100)):
        self.page_count = page_count
        self.size = size
        self.rendered: List[int] = []

    def get_page_count(self, content: bytes) -> int:
        return self.page_count

    def render_page(self, content: bytes, page_num: int) -> Optional[Image.Image]:
        self.rendered.append(page_num)
        return Image.new("RGB", self.size, "white")


@pytest.fixture
def fake_recognizer():
    return FakeRecognizer


@pytest.fixture
def fake_renderer():
    return FakeRenderer


# -----------------------------------------------------------------------------
# Document builders
# -----------------------------------------------------------------------------
def build_xlsx(sheets: Iterable[Sequence[Sequence]]) -> bytes:
    wb = Workbook()
    wb.remove(wb.active)
    for index, rows in enumerate(sheets):
        ws = wb.create_sheet(f"Sheet{index + 1}")
        for row in rows:
            ws.append(list(row))
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def build_docx(paragraphs: Sequence[str] = (), table: Optional[Sequence[Sequence[str]]] = None) -> bytes:
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table:
        grid = doc.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def build_pdf(page_texts: Sequence[str]) -> bytes:
    """One page per entry; an empty string gives a page without a text layer."""
    doc = fitz.open()
    for text in page_texts:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


def build_png(size=(64, 32), color="white", mode="RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def xlsx_builder():
    return build_xlsx


@pytest.fixture
def docx_builder():
    return build_docx


@pytest.fixture
def pdf_builder():
    return build_pdf


@pytest.fixture
def png_builder():
    return build_png


STRUCTURED_TEMPLATE_LINES = [
    "Student Name",
    "Parent Name",
    "Phone Number",
    "Class",
    "Region",
    "1",
    "Asha Juma",
    "Juma Mussa",
    "0712345678",
    "Form 2",
    "Dodoma",
]


@pytest.fixture
def structured_lines():
    return list(STRUCTURED_TEMPLATE_LINES)
# Fin del archivo tests/modules/contacts/conftest.py
