# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/services/tabular_extractor.py

Contact extraction from a cell grid (spreadsheet or delimited file).

Steps:
1. Header discovery: first row holding at least one non-empty cell.
2. Column mapping: each header cell (lower-cased, trimmed) is assigned to a
   semantic field when it equals or contains one of the field's synonyms.
3. Row processing: one ContactRecord per data row with a non-empty phone cell
   whose whole value normalizes to a non-empty, not yet seen number.

Author: ShuleSMS
Date: 2026-10-19
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .contact_record import CellGrid, CellValue, ContactRecord
from .phone_matcher import normalize_phone_number

logger = logging.getLogger(__name__)

# Resolution order matters: specific fields claim their column before the
# generic "name" synonym of the parent field can.
FIELD_SYNONYMS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("phone_number", ("phone number", "phone", "msisdn", "mobile", "telephone", "simu")),
    ("student_name", ("student name", "pupil name", "student", "pupil", "child")),
    ("name", ("parent name", "guardian name", "parent", "guardian", "name")),
    ("class_year", ("class", "grade", "year", "darasa")),
    ("region", ("region", "location", "district", "mkoa")),
)


def cell_to_text(value: CellValue) -> str:
    """Renders a cell as trimmed text; integral floats lose their ``.0``."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def find_header_row(rows: CellGrid) -> Optional[int]:
    for index, row in enumerate(rows):
        if any(cell_to_text(cell) for cell in row):
            return index
    return None


def map_columns(header: Sequence[CellValue]) -> Dict[str, int]:
    """
    Maps semantic fields to column indexes.

    A column serves at most one field; for each field the leftmost
    qualifying column wins.
    """
    labels = [cell_to_text(cell).lower() for cell in header]
    mapping: Dict[str, int] = {}
    claimed: set[int] = set()

    for field, synonyms in FIELD_SYNONYMS:
        for index, label in enumerate(labels):
            if not label or index in claimed:
                continue
            if any(label == synonym or synonym in label for synonym in synonyms):
                mapping[field] = index
                claimed.add(index)
                break

    return mapping


def _optional_cell(row: Sequence[CellValue], index: Optional[int]) -> Optional[str]:
    if index is None or index >= len(row):
        return None
    return cell_to_text(row[index]) or None


def extract_contacts_from_rows(rows: CellGrid) -> List[ContactRecord]:
    """Yields one contact per data row with a distinct, non-empty phone number."""
    header_index = find_header_row(rows)
    if header_index is None:
        return []

    columns = map_columns(rows[header_index])
    phone_index = columns.get("phone_number")
    if phone_index is None:
        logger.info("No phone column in header: %s", rows[header_index])
        return []

    contacts: List[ContactRecord] = []
    seen: set[str] = set()

    for row in rows[header_index + 1:]:
        raw_phone = _optional_cell(row, phone_index)
        if not raw_phone:
            continue

        phone = normalize_phone_number(raw_phone)
        if not phone or phone in seen:
            continue
        seen.add(phone)

        contacts.append(
            ContactRecord(
                phone_number=phone,
                name=_optional_cell(row, columns.get("name")),
                student_name=_optional_cell(row, columns.get("student_name")),
                class_year=_optional_cell(row, columns.get("class_year")),
                region=_optional_cell(row, columns.get("region")),
            )
        )

    logger.debug("Tabular extraction: %d contacts from %d rows", len(contacts), len(rows))
    return contacts


__all__ = [
    "FIELD_SYNONYMS",
    "cell_to_text",
    "find_header_row",
    "map_columns",
    "extract_contacts_from_rows",
]
