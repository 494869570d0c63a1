# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/facades/extraction_facade.py

Facade for contact extraction: uploaded document -> ordered, deduplicated
list of ContactRecord.

Responsibilities:
- Classify the upload (declared media type first, extension second)
- Route it to the adapter chain of its container kind
- Apply the extractors (tabular, structured text, free-text phone matching)
- Run the OCR fallback for scanned PDFs and OCR for images
- Report per-format progress to an optional callback

All blocking work (decoding, LibreOffice, rendering, OCR) runs in worker
threads. The OCR engine and page images belong to a single call and are
released before it returns, on success and on failure.

Author: ShuleSMS
Date: 2026-10-19
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..config import ContactsConfig, get_contacts_config
from ..converters.common import ContainerRouter, DispatcherConfig
from ..converters.delimited import convert_delimited_to_rows
from ..converters.excel import convert_workbook_to_rows
from ..converters.image import load_image_for_ocr, prepare_for_ocr
from ..converters.ocr import TesseractRecognizer, TextRecognizer
from ..converters.office import convert_legacy_office
from ..converters.pdf import (
    PDF_OCR_PAGE_LIMIT,
    PageRenderer,
    PyMuPDFPageRenderer,
    extract_pdf_text,
)
from ..converters.text import read_text_lines
from ..converters.word import convert_word_to_lines
from ..enums import ContainerKind
from ..errors import ContactExtractionError, OcrFailure, UnsupportedFormat
from ..services import (
    CellGrid,
    ContactRecord,
    LineSequence,
    PhonePatternMatcher,
    dedupe_contacts,
    extract_contacts_from_rows,
    extract_structured_contacts,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str], None]

# Stateless; holds only the immutable default pattern tuple
_matcher = PhonePatternMatcher()


@dataclass(frozen=True)
class UploadedDocument:
    """Raw upload handed to the pipeline."""
    content: bytes
    media_type: Optional[str] = None
    filename: Optional[str] = None


def _phone_only(numbers: List[str]) -> List[ContactRecord]:
    return [ContactRecord.phone_only(n) for n in numbers]


async def _modernize(document: UploadedDocument, config: ContactsConfig) -> bytes:
    """Legacy Office bytes converted by LibreOffice; OOXML bytes unchanged."""
    target = ContainerRouter.legacy_target(document.media_type, document.filename)
    if target is None:
        return document.content

    extension = ContainerRouter.extension_of(document.filename) or (".xls" if target == "xlsx" else ".doc")
    return await asyncio.to_thread(
        convert_legacy_office,
        document.content,
        extension,
        target,
        document.filename,
        config,
    )


# ---------------------------------------------------------------------------
# Row formats
# ---------------------------------------------------------------------------

async def _read_rows(kind: ContainerKind, document: UploadedDocument, config: ContactsConfig) -> CellGrid:
    if kind is ContainerKind.delimited:
        return await asyncio.to_thread(convert_delimited_to_rows, document.content, document.filename)

    content = await _modernize(document, config)
    return await asyncio.to_thread(convert_workbook_to_rows, content, document.filename)


# ---------------------------------------------------------------------------
# Line formats
# ---------------------------------------------------------------------------

async def _read_lines(kind: ContainerKind, document: UploadedDocument, config: ContactsConfig) -> LineSequence:
    if kind is ContainerKind.text:
        return await asyncio.to_thread(read_text_lines, document.content, document.filename)

    content = await _modernize(document, config)
    return await asyncio.to_thread(convert_word_to_lines, content, document.filename)


def _contacts_from_lines(lines: LineSequence) -> List[ContactRecord]:
    structured = extract_structured_contacts(lines)
    if structured:
        return structured
    return _phone_only(_matcher.extract_from_lines(lines))


# ---------------------------------------------------------------------------
# PDF and image
# ---------------------------------------------------------------------------

async def _ocr_pdf_pages(
    document: UploadedDocument,
    recognizer: TextRecognizer,
    renderer: PageRenderer,
) -> str:
    """Renders and recognizes the first pages one at a time."""
    page_count = await asyncio.to_thread(renderer.get_page_count, document.content)
    texts: List[str] = []

    async with recognizer.session():
        for page_num in range(min(page_count, PDF_OCR_PAGE_LIMIT)):
            page = await asyncio.to_thread(renderer.render_page, document.content, page_num)
            if page is None:
                continue
            prepared = None
            try:
                prepared = await asyncio.to_thread(prepare_for_ocr, page)
                texts.append(await recognizer.recognize(prepared))
            finally:
                page.close()
                if prepared is not None:
                    prepared.close()

    return "\n".join(texts)


async def _extract_from_pdf(
    document: UploadedDocument,
    recognizer: TextRecognizer,
    renderer: PageRenderer,
    progress_cb: Optional[ProgressCallback],
) -> List[str]:
    text = await asyncio.to_thread(extract_pdf_text, document.content, document.filename)
    numbers = _matcher.extract(text)
    if numbers:
        return numbers

    logger.info(
        "[extract_contacts] No numbers in PDF text layer, running OCR fallback",
        extra={"upload_filename": document.filename, "page_limit": PDF_OCR_PAGE_LIMIT},
    )
    if progress_cb:
        progress_cb("ocr_fallback", "Running OCR on the first pages of the PDF...")

    try:
        ocr_text = await _ocr_pdf_pages(document, recognizer, renderer)
    except OcrFailure as e:
        logger.warning(
            "[extract_contacts] OCR fallback failed, returning text-layer result: %s",
            e,
            extra={"upload_filename": document.filename},
        )
        return numbers

    return _matcher.extract(ocr_text)


async def _extract_from_image(document: UploadedDocument, recognizer: TextRecognizer) -> List[str]:
    image = await asyncio.to_thread(load_image_for_ocr, document.content, document.filename)
    try:
        async with recognizer.session():
            text = await recognizer.recognize(image)
    finally:
        image.close()
    return _matcher.extract(text)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def extract_contacts_from_file(
    document: UploadedDocument,
    *,
    recognizer: Optional[TextRecognizer] = None,
    renderer: Optional[PageRenderer] = None,
    progress_cb: Optional[ProgressCallback] = None,
    config: Optional[ContactsConfig] = None,
) -> List[ContactRecord]:
    """
    Extracts contacts from an uploaded document.

    Args:
        document: Upload bytes with declared media type and file name
        recognizer: OCR engine (injectable; Tesseract by default)
        renderer: PDF page renderer (injectable; PyMuPDF by default)
        progress_cb: Optional callback (stage, message)
        config: Engine settings (read from the environment by default)

    Returns:
        Contacts in first-seen order, unique by phone number. Empty when the
        document holds no recognizable numbers.

    Raises:
        UnsupportedFormat: container type not recognized
        DecodeFailure: container cannot be parsed
        OcrFailure: OCR failed on an image upload
    """
    kind = ContainerRouter.classify(document.media_type, document.filename)
    cfg = config or get_contacts_config()

    logger.info(
        "[extract_contacts] Dispatching upload",
        extra={
            "upload_filename": document.filename,
            "media_type": document.media_type,
            "container_kind": kind.value,
            "byte_size": len(document.content),
        },
    )
    if progress_cb:
        progress_cb("processing", DispatcherConfig.get_progress_message(kind))

    try:
        match kind:
            case ContainerKind.delimited | ContainerKind.workbook:
                rows = await _read_rows(kind, document, cfg)
                logger.debug("[extract_contacts] %d rows read", len(rows))
                contacts = extract_contacts_from_rows(rows)
            case ContainerKind.word | ContainerKind.text:
                lines = await _read_lines(kind, document, cfg)
                logger.debug("[extract_contacts] %d lines read", len(lines))
                contacts = _contacts_from_lines(lines)
            case ContainerKind.pdf:
                contacts = _phone_only(
                    await _extract_from_pdf(
                        document,
                        recognizer or TesseractRecognizer.from_config(cfg),
                        renderer or PyMuPDFPageRenderer(dpi=cfg.pdf_render_dpi),
                        progress_cb,
                    )
                )
            case ContainerKind.image:
                contacts = _phone_only(
                    await _extract_from_image(document, recognizer or TesseractRecognizer.from_config(cfg))
                )
            case _:
                raise UnsupportedFormat(
                    f"No adapter for container kind {kind}",
                    filename=document.filename,
                    media_type=document.media_type,
                )
    except ContactExtractionError as e:
        if e.filename is None:
            e.filename = document.filename
        logger.error(
            "[extract_contacts] Extraction failed: %s",
            e,
            extra={"upload_filename": document.filename, "container_kind": kind.value},
        )
        raise

    contacts = dedupe_contacts(contacts)

    logger.info(
        "[extract_contacts] Extraction completed",
        extra={"upload_filename": document.filename, "container_kind": kind.value, "total": len(contacts)},
    )
    if progress_cb:
        progress_cb("completed", f"Found {len(contacts)} contacts")

    return contacts


async def extract_phone_numbers_from_file(
    document: UploadedDocument,
    *,
    recognizer: Optional[TextRecognizer] = None,
    renderer: Optional[PageRenderer] = None,
    progress_cb: Optional[ProgressCallback] = None,
    config: Optional[ContactsConfig] = None,
) -> List[str]:
    """Phone numbers only, for callers that do not need names."""
    contacts = await extract_contacts_from_file(
        document,
        recognizer=recognizer,
        renderer=renderer,
        progress_cb=progress_cb,
        config=config,
    )
    return [c.phone_number for c in contacts]


__all__ = [
    "ProgressCallback",
    "UploadedDocument",
    "extract_contacts_from_file",
    "extract_phone_numbers_from_file",
]
# Fin del archivo extraction_facade.py
