# -*- coding: utf-8 -*-
"""
tests/modules/contacts/facades/test_extraction_facade_contracts.py

Contract tests for the extraction facade.

Checks:
- The public entry points exist and are async.
- Their signatures expose the injectable collaborators as keyword-only.

Author: ShuleSMS
Date: 2026-10-19
"""

import dataclasses
import inspect

import pytest

from shulesms.modules import contacts
from shulesms.modules.contacts.facades import (
    UploadedDocument,
    extract_contacts_from_file,
    extract_phone_numbers_from_file,
)


@pytest.mark.parametrize("fn", [extract_contacts_from_file, extract_phone_numbers_from_file])
def test_entry_points_are_coroutines(fn):
    assert inspect.iscoroutinefunction(fn)


@pytest.mark.parametrize("fn", [extract_contacts_from_file, extract_phone_numbers_from_file])
def test_collaborators_are_keyword_only(fn):
    params = inspect.signature(fn).parameters
    assert list(params)[0] == "document"
    for name in ("recognizer", "renderer", "progress_cb", "config"):
        assert params[name].kind is inspect.Parameter.KEYWORD_ONLY
        assert params[name].default is None


def test_uploaded_document_fields():
    fields = {f.name for f in dataclasses.fields(UploadedDocument)}
    assert fields == {"content", "media_type", "filename"}
    document = UploadedDocument(b"x")
    assert document.media_type is None and document.filename is None


def test_module_exports():
    for name in contacts.__all__:
        assert hasattr(contacts, name), f"shulesms.modules.contacts is missing {name}"
# Fin del archivo test_extraction_facade_contracts.py
