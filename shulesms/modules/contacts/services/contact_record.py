# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/services/contact_record.py

Canonical output unit of the extraction pipeline and the transient
intermediate shapes (cell grid, line sequence) adapters produce.

Author: ShuleSMS
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

# A cell of a spreadsheet / delimited row: text, number or empty
CellValue = Union[str, int, float, None]
CellGrid = List[List[CellValue]]
# Trimmed, non-empty text lines in source order
LineSequence = List[str]


@dataclass(frozen=True)
class ContactRecord:
    """A recipient discovered in an uploaded document."""
    phone_number: str
    name: Optional[str] = None
    student_name: Optional[str] = None
    class_year: Optional[str] = None
    region: Optional[str] = None

    @classmethod
    def phone_only(cls, phone_number: str) -> "ContactRecord":
        return cls(phone_number=phone_number)

    def to_dict(self) -> dict:
        return {
            "phone_number": self.phone_number,
            "name": self.name,
            "student_name": self.student_name,
            "class_year": self.class_year,
            "region": self.region,
        }


def dedupe_contacts(contacts: Iterable[ContactRecord]) -> List[ContactRecord]:
    """
    Keeps the first record for each phone number, preserving order.

    Later duplicates are discarded, never merged into the first one.
    """
    seen: set[str] = set()
    unique: List[ContactRecord] = []
    for contact in contacts:
        if not contact.phone_number or contact.phone_number in seen:
            continue
        seen.add(contact.phone_number)
        unique.append(contact)
    return unique


__all__ = [
    "CellValue",
    "CellGrid",
    "LineSequence",
    "ContactRecord",
    "dedupe_contacts",
]
