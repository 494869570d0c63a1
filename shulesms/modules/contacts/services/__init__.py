# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/services/__init__.py

Pure extraction services: phone matching, tabular and structured-text
extraction, recipient helpers.
"""

from .contact_record import (
    CellGrid,
    CellValue,
    ContactRecord,
    LineSequence,
    dedupe_contacts,
)
from .phone_matcher import (
    DEFAULT_PHONE_PATTERNS,
    MIN_PHONE_LENGTH,
    PhonePattern,
    PhonePatternMatcher,
    extract_phone_numbers,
    normalize_phone_number,
)
from .tabular_extractor import extract_contacts_from_rows
from .structured_text_extractor import extract_structured_contacts
from .recipients import to_gateway_recipients, unique_recipients

__all__ = [
    "CellGrid",
    "CellValue",
    "ContactRecord",
    "LineSequence",
    "dedupe_contacts",
    "DEFAULT_PHONE_PATTERNS",
    "MIN_PHONE_LENGTH",
    "PhonePattern",
    "PhonePatternMatcher",
    "extract_phone_numbers",
    "normalize_phone_number",
    "extract_contacts_from_rows",
    "extract_structured_contacts",
    "to_gateway_recipients",
    "unique_recipients",
]
