# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/facades

Async entry points of the contacts module.
"""

from .extraction_facade import (
    ProgressCallback,
    UploadedDocument,
    extract_contacts_from_file,
    extract_phone_numbers_from_file,
)

__all__ = [
    "ProgressCallback",
    "UploadedDocument",
    "extract_contacts_from_file",
    "extract_phone_numbers_from_file",
]
