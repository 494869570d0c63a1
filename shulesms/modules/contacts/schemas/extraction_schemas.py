# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/schemas/extraction_schemas.py

Pydantic v2 schemas for the contact extraction endpoint.

Includes:
- ContactRecordResponse: one extracted contact.
- ExtractionResponse: result of extracting an uploaded file.
- ExtractionErrorDetail: `detail` payload of 4xx/5xx responses.
- ExtractionErrorResponse: full error body, documented in OpenAPI.

Author: ShuleSMS
Date: 2026-10-19
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import ContainerKind


class ContactRecordResponse(BaseModel):
    """
    Contact extracted from an upload. Only the phone number is guaranteed.
    """

    model_config = ConfigDict(from_attributes=True)

    phone_number: str = Field(..., description="Normalized number, e.g. +255712345678")
    name: Optional[str] = Field(default=None, description="Parent or guardian name")
    student_name: Optional[str] = Field(default=None, description="Student name")
    class_year: Optional[str] = Field(default=None, description="Class, grade or year")
    region: Optional[str] = Field(default=None, description="Region or location")


class ExtractionResponse(BaseModel):
    """
    Contacts found in one uploaded file, in first-seen order.
    """

    filename: Optional[str] = Field(default=None, description="Original file name")
    container_kind: ContainerKind = Field(..., description="Detected container format")
    total: int = Field(..., ge=0, description="Number of contacts")
    contacts: List[ContactRecordResponse] = Field(default_factory=list)


class ExtractionErrorDetail(BaseModel):
    error: str = Field(..., description="Failure kind, e.g. unsupported_format")
    message: str
    filename: Optional[str] = None


class ExtractionErrorResponse(BaseModel):
    """Body of 413/415/422/502 responses, as produced by HTTPException."""

    detail: ExtractionErrorDetail


__all__ = ["ContactRecordResponse", "ExtractionResponse", "ExtractionErrorDetail", "ExtractionErrorResponse"]
