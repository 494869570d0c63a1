# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/word/word_converter.py

Word adapter (.docx; .doc/.odt after LibreOffice conversion).

Produces the raw-text line sequence of the document in body order:
paragraph text, and for tables every cell on its own line (row by row).
A template typed as a five-column table therefore yields the same line
sequence as the same template typed as paragraphs.

Author: ShuleSMS
Date: 2026-10-19
"""

import io
import logging
from typing import Iterator, List, Optional

from docx import Document
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from ...errors import DecodeFailure
from ...services.contact_record import LineSequence
from ..text import split_lines

logger = logging.getLogger(__name__)


def _table_cell_texts(table: Table) -> Iterator[str]:
    for row in table.rows:
        previous = None
        for cell in row.cells:
            # Merged cells are repeated by python-docx
            if previous is not None and cell._tc is previous:
                continue
            previous = cell._tc
            yield cell.text


def _body_texts(document) -> Iterator[str]:
    for child in document.element.body.iterchildren():
        if child.tag == qn("w:p"):
            yield Paragraph(child, document).text
        elif child.tag == qn("w:tbl"):
            yield from _table_cell_texts(Table(child, document))


def convert_word_to_lines(content: bytes, filename: Optional[str] = None) -> LineSequence:
    """
    Raises:
        DecodeFailure: if python-docx cannot open the document
    """
    try:
        document = Document(io.BytesIO(content))
    except Exception as e:
        raise DecodeFailure(f"Cannot open Word document: {e}", filename) from e

    lines: List[str] = split_lines("\n".join(_body_texts(document)))
    logger.debug("Read %d lines from %s", len(lines), filename or "<upload>")
    return lines


__all__ = ["convert_word_to_lines"]
# Fin del archivo word_converter.py
