# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/excel/excel_converter.py

Workbook adapter (.xlsx, .xlsm; .xls/.ods after LibreOffice conversion).

Every sheet is read in order and its rows are concatenated into a single
cell grid, so a header found on the first sheet also applies to rows on
later sheets. Cell values keep their native types (numbers stay numbers);
the tabular extractor stringifies them.

Author: ShuleSMS
Date: 2026-10-19
"""

import io
import logging
from typing import Optional

from openpyxl import load_workbook

from ...errors import DecodeFailure
from ...services.contact_record import CellGrid

logger = logging.getLogger(__name__)


def convert_workbook_to_rows(content: bytes, filename: Optional[str] = None) -> CellGrid:
    """
    Reads all sheets of an OOXML workbook into one cell grid.

    Raises:
        DecodeFailure: if openpyxl cannot open the workbook
    """
    try:
        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except Exception as e:
        raise DecodeFailure(f"Cannot open workbook: {e}", filename) from e

    rows: CellGrid = []
    try:
        for sheet in workbook.worksheets:
            sheet_rows = [list(row) for row in sheet.iter_rows(values_only=True)]
            logger.debug("Sheet %r: %d rows", sheet.title, len(sheet_rows))
            rows.extend(sheet_rows)
    finally:
        workbook.close()

    return rows


__all__ = ["convert_workbook_to_rows"]
# Fin del archivo excel_converter.py
