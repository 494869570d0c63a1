# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts

Contact extraction from uploaded documents (CSV, Excel, Word, text, PDF,
images) for bulk SMS campaigns.

Public API:
    from shulesms.modules.contacts import UploadedDocument, extract_contacts_from_file
"""

from .enums import ContainerKind
from .errors import ContactExtractionError, DecodeFailure, OcrFailure, UnsupportedFormat
from .facades import UploadedDocument, extract_contacts_from_file, extract_phone_numbers_from_file
from .services import ContactRecord, to_gateway_recipients, unique_recipients

__all__ = [
    "ContainerKind",
    "ContactExtractionError",
    "DecodeFailure",
    "OcrFailure",
    "UnsupportedFormat",
    "UploadedDocument",
    "extract_contacts_from_file",
    "extract_phone_numbers_from_file",
    "ContactRecord",
    "to_gateway_recipients",
    "unique_recipients",
]
