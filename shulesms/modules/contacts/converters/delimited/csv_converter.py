# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/delimited/csv_converter.py

Delimited-text adapter (.csv, .tsv): decodes the upload and parses it into a
cell grid for the tabular extractor.

- Encoding detected by charset-normalizer (see converters.text).
- Delimiter sniffed among comma, semicolon, tab and pipe; falls back to comma.
- Blank rows are kept as empty lists; header discovery skips them.

Author: ShuleSMS
Date: 2026-10-19
"""

import csv
import io
import logging
from typing import Optional

from ...errors import DecodeFailure
from ...services.contact_record import CellGrid
from ..text import decode_text

logger = logging.getLogger(__name__)

SNIFF_SAMPLE_CHARS = 4096
CANDIDATE_DELIMITERS = ",;\t|"


def _sniff_dialect(text: str):
    try:
        return csv.Sniffer().sniff(text[:SNIFF_SAMPLE_CHARS], delimiters=CANDIDATE_DELIMITERS)
    except csv.Error:
        return csv.excel


def parse_delimited_text(text: str, filename: Optional[str] = None) -> CellGrid:
    """
    Parses delimited text into rows of cell strings.

    Raises:
        DecodeFailure: if the csv reader rejects the content
    """
    if not text.strip():
        return []

    dialect = _sniff_dialect(text)
    try:
        rows = [list(row) for row in csv.reader(io.StringIO(text), dialect)]
    except csv.Error as e:
        raise DecodeFailure(f"Malformed delimited file: {e}", filename) from e

    logger.debug("Parsed %d rows from %s (delimiter=%r)", len(rows), filename or "<upload>", dialect.delimiter)
    return rows


def convert_delimited_to_rows(content: bytes, filename: Optional[str] = None) -> CellGrid:
    return parse_delimited_text(decode_text(content, filename), filename)


__all__ = ["parse_delimited_text", "convert_delimited_to_rows"]
# Fin del archivo csv_converter.py
