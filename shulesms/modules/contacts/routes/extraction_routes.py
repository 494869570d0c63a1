# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/routes/extraction_routes.py

Contact extraction endpoint.

POST /api/contacts/extract (multipart `file`)
    200 -> ExtractionResponse
    413 -> upload larger than CONTACTS_MAX_UPLOAD_BYTES
    415 -> UnsupportedFormat
    422 -> DecodeFailure
    502 -> OcrFailure

Author: ShuleSMS
Date: 2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from ..config import ContactsConfig, get_contacts_config
from ..converters.common import ContainerRouter
from ..converters.ocr import TesseractRecognizer, TextRecognizer
from ..converters.pdf import PageRenderer, PyMuPDFPageRenderer
from ..errors import ContactExtractionError, DecodeFailure, OcrFailure, UnsupportedFormat
from ..facades import UploadedDocument, extract_contacts_from_file
from ..schemas import (
    ContactRecordResponse,
    ExtractionErrorDetail,
    ExtractionErrorResponse,
    ExtractionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contacts", tags=["contacts"])

ERROR_STATUS = {
    UnsupportedFormat: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    DecodeFailure: status.HTTP_422_UNPROCESSABLE_ENTITY,
    OcrFailure: status.HTTP_502_BAD_GATEWAY,
}

_ERROR_RESPONSES = {
    code: {"model": ExtractionErrorResponse}
    for code in (status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, *ERROR_STATUS.values())
}


# ---------------------------------------------------------------------------
# Dependencies (overridable in tests)
# ---------------------------------------------------------------------------

def get_contacts_settings() -> ContactsConfig:
    return get_contacts_config()


def get_text_recognizer(config: ContactsConfig = Depends(get_contacts_settings)) -> TextRecognizer:
    return TesseractRecognizer.from_config(config)


def get_page_renderer(config: ContactsConfig = Depends(get_contacts_settings)) -> PageRenderer:
    return PyMuPDFPageRenderer(dpi=config.pdf_render_dpi)


def _error_status(exc: ContactExtractionError) -> int:
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post(
    "/extract",
    response_model=ExtractionResponse,
    responses=_ERROR_RESPONSES,
    summary="Extract contacts from an uploaded file",
    description=(
        "Accepts CSV, Excel, Word, plain text, PDF or image uploads and returns "
        "the phone numbers (with names when the layout provides them) found in it."
    ),
)
async def extract_contacts(
    file: UploadFile = File(..., description="Contact list document"),
    config: ContactsConfig = Depends(get_contacts_settings),
    recognizer: TextRecognizer = Depends(get_text_recognizer),
    renderer: PageRenderer = Depends(get_page_renderer),
) -> ExtractionResponse:
    content = await file.read(config.max_upload_bytes + 1)
    if len(content) > config.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=ExtractionErrorDetail(
                error="file_too_large",
                message=f"File exceeds {config.max_upload_bytes} bytes",
                filename=file.filename,
            ).model_dump(),
        )

    document = UploadedDocument(content=content, media_type=file.content_type, filename=file.filename)

    try:
        contacts = await extract_contacts_from_file(
            document,
            recognizer=recognizer,
            renderer=renderer,
            config=config,
        )
    except ContactExtractionError as exc:
        raise HTTPException(
            status_code=_error_status(exc),
            detail=ExtractionErrorDetail(error=exc.kind, message=str(exc), filename=exc.filename).model_dump(),
        ) from exc

    return ExtractionResponse(
        filename=file.filename,
        container_kind=ContainerRouter.classify(file.content_type, file.filename),
        total=len(contacts),
        contacts=[ContactRecordResponse.model_validate(c) for c in contacts],
    )


__all__ = ["router", "get_contacts_settings", "get_text_recognizer", "get_page_renderer"]
# Fin del archivo extraction_routes.py
