# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/enums/container_kind_enum.py

Closed set of container formats the extraction pipeline accepts.

Author: ShuleSMS
Date: 2026-10-19
"""

from enum import StrEnum


class ContainerKind(StrEnum):
    """Uploaded document type, as resolved by the router."""
    delimited = "delimited"  # .csv / .tsv
    workbook  = "workbook"   # .xlsx / .xlsm / .xls / .ods
    word      = "word"       # .docx / .doc / .odt
    text      = "text"       # .txt
    pdf       = "pdf"
    image     = "image"
