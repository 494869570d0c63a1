# -*- coding: utf-8 -*-
from .extraction_schemas import (
    ContactRecordResponse,
    ExtractionErrorDetail,
    ExtractionErrorResponse,
    ExtractionResponse,
)

__all__ = [
    "ContactRecordResponse",
    "ExtractionErrorDetail",
    "ExtractionErrorResponse",
    "ExtractionResponse",
]
