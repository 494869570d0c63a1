# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/config.py

Configuration for the contacts module (extraction engines and upload limits).

Environment variables:
    # OCR (Tesseract)
    CONTACTS_OCR_LANG: Tesseract language pack(s), e.g. "eng" or "eng+swa"
    CONTACTS_TESSERACT_CMD: Path to the tesseract binary (optional)

    # PDF rendering
    CONTACTS_PDF_RENDER_DPI: DPI used when rasterizing PDF pages for OCR

    # Legacy Office formats (.xls/.ods/.doc/.odt)
    CONTACTS_SOFFICE_BIN: LibreOffice binary
    CONTACTS_SOFFICE_TIMEOUT_SEC: Conversion timeout in seconds

    # Uploads
    CONTACTS_MAX_UPLOAD_BYTES: Maximum accepted upload size

The page limit for the PDF OCR fallback and the image resize cap are
pipeline constants (see converters), not settings.

Author: ShuleSMS
Date: 2026-10-19
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ContactsConfig(BaseSettings):
    """Engine and boundary settings for contact extraction."""

    # OCR
    ocr_lang: str = "eng"
    tesseract_cmd: Optional[str] = None

    # PDF
    pdf_render_dpi: int = 200

    # Legacy Office
    soffice_bin: str = "soffice"
    soffice_timeout_sec: int = 60

    # Uploads
    max_upload_bytes: int = 20 * 1024 * 1024

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CONTACTS_",
        case_sensitive=False,
        extra="ignore",
    )


def get_contacts_config() -> ContactsConfig:
    """Builds a fresh ContactsConfig from the current environment."""
    return ContactsConfig()


__all__ = ["ContactsConfig", "get_contacts_config"]
