# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/services/structured_text_extractor.py

Template-based contact extraction from a line sequence (plain text, Word).

Recognized layout:

    Student Name
    Parent Name
    Phone Number
    Class            <- any label containing "class"
    Region           <- any label containing "region"
    1                <- optional bare index line
    Asha Juma
    Juma Mussa
    0712345678
    Form 2
    Dodoma
    ...

Each record takes exactly five lines after the label block. Parsing stops as
soon as fewer than five lines remain, so any deviation from the cadence
truncates the remaining records. Documents with blank or annotation lines
between records are therefore only partially read.

Author: ShuleSMS
Date: 2026-10-19
"""

import logging
import re
from typing import List, Optional, Sequence

from .contact_record import ContactRecord, LineSequence
from .phone_matcher import normalize_phone_number

logger = logging.getLogger(__name__)

RECORD_SIZE = 5
_INDEX_LINE_RE = re.compile(r"^\d+[.)]?$")


def _label(line: str) -> str:
    return line.strip().rstrip(":").strip().lower()


def _is_label_block(lines: Sequence[str], start: int) -> bool:
    student, parent, phone, class_label, region_label = (
        _label(line) for line in lines[start:start + RECORD_SIZE]
    )
    return (
        student == "student name"
        and parent == "parent name"
        and phone == "phone number"
        and "class" in class_label
        and "region" in region_label
    )


def find_label_block(lines: LineSequence) -> Optional[int]:
    """Index of the first line of the label quintet, or None."""
    for start in range(len(lines) - RECORD_SIZE + 1):
        if _is_label_block(lines, start):
            return start
    return None


def _value(line: str) -> Optional[str]:
    return line.strip() or None


def extract_structured_contacts(lines: LineSequence) -> List[ContactRecord]:
    """
    Parses records that follow the five-field label block.

    Returns an empty list when the label block is absent; callers then fall
    back to unstructured phone extraction.
    """
    start = find_label_block(lines)
    if start is None:
        return []

    contacts: List[ContactRecord] = []
    seen: set[str] = set()
    position = start + RECORD_SIZE

    while position < len(lines):
        if _INDEX_LINE_RE.match(lines[position].strip()):
            position += 1
        if len(lines) - position < RECORD_SIZE:
            break

        student, parent, phone_line, class_year, region = lines[position:position + RECORD_SIZE]
        position += RECORD_SIZE

        phone = normalize_phone_number(phone_line)
        if not phone or phone in seen:
            continue
        seen.add(phone)

        contacts.append(
            ContactRecord(
                phone_number=phone,
                name=_value(parent),
                student_name=_value(student),
                class_year=_value(class_year),
                region=_value(region),
            )
        )

    logger.debug("Structured extraction: %d contacts (label block at line %d)", len(contacts), start)
    return contacts


__all__ = ["RECORD_SIZE", "find_label_block", "extract_structured_contacts"]
