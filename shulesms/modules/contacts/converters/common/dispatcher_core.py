# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/common/dispatcher_core.py

Core dispatcher logic for container type detection.
Resolves an upload to a ContainerKind from its declared media type first and
its file-name extension second. A .csv/.tsv name wins over the media types
browsers commonly mislabel CSV files with.

Author: ShuleSMS
Date: 2026-10-19
"""

import logging
import os
from typing import Optional

from ...enums import ContainerKind
from ...errors import UnsupportedFormat

logger = logging.getLogger(__name__)

# Media types that carry no information about the container
GENERIC_MEDIA_TYPES = frozenset({"", "application/octet-stream", "binary/octet-stream"})

# Browsers label .csv uploads with these (Windows with Excel installed sends
# the Excel type), so a delimited extension overrides them
AMBIGUOUS_CSV_MEDIA_TYPES = frozenset({"application/vnd.ms-excel", "text/plain"})


class ContainerRouter:
    """
    Determines which adapter chain handles an upload.
    Single responsibility: container type detection.
    """

    MEDIA_TYPE_MAPPING = {
        "text/csv": ContainerKind.delimited,
        "application/csv": ContainerKind.delimited,
        "text/tab-separated-values": ContainerKind.delimited,
        "application/vnd.ms-excel": ContainerKind.workbook,
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": ContainerKind.workbook,
        "application/vnd.ms-excel.sheet.macroenabled.12": ContainerKind.workbook,
        "application/vnd.oasis.opendocument.spreadsheet": ContainerKind.workbook,
        "application/msword": ContainerKind.word,
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ContainerKind.word,
        "application/vnd.oasis.opendocument.text": ContainerKind.word,
        "text/plain": ContainerKind.text,
        "application/pdf": ContainerKind.pdf,
    }

    EXTENSION_MAPPING = {
        ".csv": ContainerKind.delimited,
        ".tsv": ContainerKind.delimited,
        ".xlsx": ContainerKind.workbook,
        ".xlsm": ContainerKind.workbook,
        ".xls": ContainerKind.workbook,
        ".ods": ContainerKind.workbook,
        ".docx": ContainerKind.word,
        ".doc": ContainerKind.word,
        ".odt": ContainerKind.word,
        ".txt": ContainerKind.text,
        ".pdf": ContainerKind.pdf,
        ".png": ContainerKind.image,
        ".jpg": ContainerKind.image,
        ".jpeg": ContainerKind.image,
        ".bmp": ContainerKind.image,
        ".gif": ContainerKind.image,
        ".tif": ContainerKind.image,
        ".tiff": ContainerKind.image,
        ".webp": ContainerKind.image,
    }

    # Formats LibreOffice must convert before python-docx/openpyxl can read them
    LEGACY_EXTENSIONS = {
        ".xls": "xlsx",
        ".ods": "xlsx",
        ".doc": "docx",
        ".odt": "docx",
    }
    LEGACY_MEDIA_TYPES = {
        "application/vnd.ms-excel": "xlsx",
        "application/vnd.oasis.opendocument.spreadsheet": "xlsx",
        "application/msword": "docx",
        "application/vnd.oasis.opendocument.text": "docx",
    }

    @staticmethod
    def normalize_media_type(media_type: Optional[str]) -> str:
        """'Text/CSV; charset=utf-8' -> 'text/csv'"""
        return (media_type or "").split(";", 1)[0].strip().lower()

    @staticmethod
    def extension_of(filename: Optional[str]) -> str:
        return os.path.splitext(filename or "")[1].lower()

    @classmethod
    def get_container_kind(cls, media_type: Optional[str], filename: Optional[str]) -> Optional[ContainerKind]:
        """
        Resolve the container kind for an upload.

        Args:
            media_type: Declared media type (may be empty or generic)
            filename: Original file name

        Returns:
            ContainerKind or None if nothing matches
        """
        declared = cls.normalize_media_type(media_type)
        by_extension = cls.EXTENSION_MAPPING.get(cls.extension_of(filename))
        if declared in AMBIGUOUS_CSV_MEDIA_TYPES and by_extension is ContainerKind.delimited:
            return by_extension

        if declared not in GENERIC_MEDIA_TYPES:
            kind = cls.MEDIA_TYPE_MAPPING.get(declared)
            if kind is None and declared.startswith("image/"):
                kind = ContainerKind.image
            if kind is not None:
                return kind

        return by_extension

    @classmethod
    def classify(cls, media_type: Optional[str], filename: Optional[str]) -> ContainerKind:
        """
        Like get_container_kind, but unknown containers are a terminal failure.

        Raises:
            UnsupportedFormat: if neither media type nor extension is supported
        """
        kind = cls.get_container_kind(media_type, filename)
        if kind is None:
            raise UnsupportedFormat(
                f"Unsupported file type: {media_type or 'unknown'} ({filename or 'unnamed'})",
                filename=filename,
                media_type=media_type,
            )
        logger.debug("Classified %s (%s) as %s", filename, media_type, kind.value)
        return kind

    @classmethod
    def legacy_target(cls, media_type: Optional[str], filename: Optional[str]) -> Optional[str]:
        """
        Target format ('xlsx' / 'docx') when the upload is a legacy Office
        container, None otherwise. The extension decides when present.
        """
        extension = cls.extension_of(filename)
        if extension in cls.EXTENSION_MAPPING:
            return cls.LEGACY_EXTENSIONS.get(extension)
        return cls.LEGACY_MEDIA_TYPES.get(cls.normalize_media_type(media_type))


class DispatcherConfig:
    """
    Progress messages reported while each container kind is processed.
    """

    PROGRESS_MESSAGES = {
        ContainerKind.pdf: "Extracting text from PDF (if scanned, running OCR on a few pages)...",
        ContainerKind.image: "Running OCR on image...",
        ContainerKind.word: "Reading document content...",
        ContainerKind.workbook: "Parsing spreadsheet sheets...",
        ContainerKind.delimited: "Parsing CSV rows...",
        ContainerKind.text: "Parsing text file...",
    }

    @classmethod
    def get_progress_message(cls, kind: ContainerKind) -> str:
        return cls.PROGRESS_MESSAGES.get(kind, "Processing file...")


__all__ = ["ContainerRouter", "DispatcherConfig", "GENERIC_MEDIA_TYPES", "AMBIGUOUS_CSV_MEDIA_TYPES"]
