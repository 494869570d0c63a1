# -*- coding: utf-8 -*-
"""
tests/modules/contacts/facades/test_extraction_facade_integration.py

End-to-end tests of the extraction facade over real in-memory documents.
OCR and page rendering use the fakes from conftest.

Author: ShuleSMS
Date: 2026-10-19
"""

from unittest.mock import patch

import pytest

from shulesms.modules.contacts.config import ContactsConfig
from shulesms.modules.contacts.errors import DecodeFailure, OcrFailure, UnsupportedFormat
from shulesms.modules.contacts.facades import (
    UploadedDocument,
    extract_contacts_from_file,
    extract_phone_numbers_from_file,
)
from shulesms.modules.contacts.services import ContactRecord

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture
def config():
    return ContactsConfig()


# ---------------------------------------------------------------------------
# Row formats
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_csv_with_invalid_row(config):
    document = UploadedDocument(
        content=b"Phone Number,Parent Name\n+255712345678,Jane Doe\ninvalid,John Doe\n",
        media_type="text/csv",
        filename="parents.csv",
    )
    contacts = await extract_contacts_from_file(document, config=config)
    assert contacts == [ContactRecord(phone_number="+255712345678", name="Jane Doe")]


@pytest.mark.asyncio
@pytest.mark.parametrize("media_type", ["application/vnd.ms-excel", "text/plain"])
async def test_csv_mislabelled_by_browser_keeps_columns(config, media_type):
    document = UploadedDocument(
        content=b"Phone Number,Parent Name\n+255712345678,Jane Doe\n",
        media_type=media_type,
        filename="parents.csv",
    )
    contacts = await extract_contacts_from_file(document, config=config)
    assert contacts == [ContactRecord(phone_number="+255712345678", name="Jane Doe")]


@pytest.mark.asyncio
async def test_xlsx_multi_sheet(config, xlsx_builder):
    content = xlsx_builder([
        [["Student Name", "Parent Name", "Phone", "Class", "Region"],
         ["Asha Juma", "Juma Mussa", "0712345678", "Form 2", "Dodoma"]],
        [["Neema Ali", "Ali Hassan", 255754000111, "Form 3", "Arusha"]],
    ])
    contacts = await extract_contacts_from_file(
        UploadedDocument(content, XLSX, "parents.xlsx"), config=config
    )
    assert [c.phone_number for c in contacts] == ["+255712345678", "+255754000111"]
    assert contacts[0] == ContactRecord("+255712345678", "Juma Mussa", "Asha Juma", "Form 2", "Dodoma")


@pytest.mark.asyncio
async def test_spreadsheet_without_phone_column_is_empty_not_error(config, xlsx_builder):
    content = xlsx_builder([[["Name", "Region"], ["Juma", "Dodoma"]]])
    assert await extract_contacts_from_file(UploadedDocument(content, XLSX, "list.xlsx"), config=config) == []


@pytest.mark.asyncio
async def test_legacy_xls_is_converted_first(config, xlsx_builder):
    converted = xlsx_builder([[["Phone"], ["0712345678"]]])
    with patch(
        "shulesms.modules.contacts.facades.extraction_facade.convert_legacy_office",
        return_value=converted,
    ) as mock_convert:
        contacts = await extract_contacts_from_file(
            UploadedDocument(b"legacy bytes", "application/vnd.ms-excel", "list.xls"), config=config
        )
    assert [c.phone_number for c in contacts] == ["+255712345678"]
    args = mock_convert.call_args.args
    assert args[1:3] == (".xls", "xlsx")


@pytest.mark.asyncio
async def test_corrupt_workbook_raises_with_filename(config):
    with pytest.raises(DecodeFailure) as ei:
        await extract_contacts_from_file(UploadedDocument(b"garbage", XLSX, "broken.xlsx"), config=config)
    assert ei.value.filename == "broken.xlsx"


# ---------------------------------------------------------------------------
# Line formats
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_free_text_numbers_become_phone_only_records(config):
    document = UploadedDocument(b"Call me at 0712345678 or 0712345678 again", "text/plain", "note.txt")
    assert await extract_contacts_from_file(document, config=config) == [ContactRecord.phone_only("+255712345678")]


@pytest.mark.asyncio
async def test_one_number_per_line_text_file(config):
    document = UploadedDocument(b"0712345678\n0754000111\n+254712345678\n", None, "numbers.txt")
    assert await extract_phone_numbers_from_file(document, config=config) == [
        "+254712345678",
        "+255712345678",
        "+255754000111",
    ]


@pytest.mark.asyncio
async def test_structured_template_takes_precedence(config, structured_lines):
    text = "\n".join(structured_lines + ["Office: 0754000111"])
    contacts = await extract_contacts_from_file(
        UploadedDocument(text.encode("utf-8"), "text/plain", "template.txt"), config=config
    )
    # The trailing free-text number is not part of the template
    assert contacts == [
        ContactRecord("+255712345678", "Juma Mussa", "Asha Juma", "Form 2", "Dodoma")
    ]


@pytest.mark.asyncio
async def test_docx_table_template(config, docx_builder):
    content = docx_builder(
        ["Msasani Primary School"],
        table=[
            ["Student Name", "Parent Name", "Phone Number", "Class", "Region"],
            ["Asha Juma", "Juma Mussa", "0712345678", "Form 2", "Dodoma"],
            ["Neema Ali", "Ali Hassan", "0754 000 111", "Form 3", "Arusha"],
        ],
    )
    contacts = await extract_contacts_from_file(UploadedDocument(content, DOCX, "list.docx"), config=config)
    assert [c.student_name for c in contacts] == ["Asha Juma", "Neema Ali"]
    assert contacts[1].phone_number == "+255754000111"


# ---------------------------------------------------------------------------
# PDF
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_pdf_text_layer_skips_ocr(config, pdf_builder, fake_recognizer, fake_renderer):
    recognizer, renderer = fake_recognizer(), fake_renderer()
    contacts = await extract_contacts_from_file(
        UploadedDocument(pdf_builder(["Juma 0712345678"]), "application/pdf", "list.pdf"),
        recognizer=recognizer,
        renderer=renderer,
        config=config,
    )
    assert contacts == [ContactRecord.phone_only("+255712345678")]
    assert renderer.rendered == []
    assert recognizer.opened == 0


@pytest.mark.asyncio
async def test_scanned_pdf_falls_back_to_ocr(config, pdf_builder, fake_recognizer, fake_renderer):
    recognizer = fake_recognizer(["contact: +254712345678"])
    renderer = fake_renderer(page_count=1)
    contacts = await extract_contacts_from_file(
        UploadedDocument(pdf_builder([""]), "application/pdf", "scan.pdf"),
        recognizer=recognizer,
        renderer=renderer,
        config=config,
    )
    assert contacts == [ContactRecord.phone_only("+254712345678")]
    assert recognizer.opened == 1
    assert recognizer.closed == 1


@pytest.mark.asyncio
async def test_ocr_fallback_is_bounded_to_first_pages(config, pdf_builder, fake_recognizer, fake_renderer):
    recognizer = fake_recognizer(["0712345678", "0712345678", "0754000111", "0713000222", "0713000333"])
    renderer = fake_renderer(page_count=5)
    numbers = await extract_phone_numbers_from_file(
        UploadedDocument(pdf_builder(["", "", "", "", ""]), "application/pdf", "scan.pdf"),
        recognizer=recognizer,
        renderer=renderer,
        config=config,
    )
    assert renderer.rendered == [0, 1, 2]
    assert numbers == ["+255712345678", "+255754000111"]


@pytest.mark.asyncio
async def test_large_pages_are_downscaled_before_ocr(config, pdf_builder, fake_recognizer, fake_renderer):
    recognizer = fake_recognizer(["0712345678"])
    renderer = fake_renderer(page_count=1, size=(2480, 3508))
    await extract_contacts_from_file(
        UploadedDocument(pdf_builder([""]), "application/pdf", "scan.pdf"),
        recognizer=recognizer,
        renderer=renderer,
        config=config,
    )
    assert max(recognizer.images[0]) == 2000


@pytest.mark.asyncio
async def test_pdf_ocr_engine_unavailable_degrades_to_empty(config, pdf_builder, fake_recognizer, fake_renderer):
    recognizer = fake_recognizer(fail_on_open=True)
    contacts = await extract_contacts_from_file(
        UploadedDocument(pdf_builder([""]), "application/pdf", "scan.pdf"),
        recognizer=recognizer,
        renderer=fake_renderer(),
        config=config,
    )
    assert contacts == []


@pytest.mark.asyncio
async def test_pdf_ocr_failure_degrades_and_releases_engine(config, pdf_builder, fake_recognizer, fake_renderer):
    recognizer = fake_recognizer(fail_on_recognize=True)
    contacts = await extract_contacts_from_file(
        UploadedDocument(pdf_builder([""]), "application/pdf", "scan.pdf"),
        recognizer=recognizer,
        renderer=fake_renderer(),
        config=config,
    )
    assert contacts == []
    assert recognizer.closed == 1


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_image_ocr(config, png_builder, fake_recognizer):
    recognizer = fake_recognizer(["Mzazi: 0712 345 678\nMlezi: +255 754 000 111"])
    numbers = await extract_phone_numbers_from_file(
        UploadedDocument(png_builder(), "image/png", "photo.png"), recognizer=recognizer, config=config
    )
    assert set(numbers) == {"+255712345678", "+255754000111"}
    assert recognizer.closed == 1


@pytest.mark.asyncio
async def test_image_ocr_failure_propagates(config, png_builder, fake_recognizer):
    recognizer = fake_recognizer(fail_on_recognize=True)
    with pytest.raises(OcrFailure) as ei:
        await extract_contacts_from_file(
            UploadedDocument(png_builder(), "image/png", "photo.png"), recognizer=recognizer, config=config
        )
    assert ei.value.filename == "photo.png"
    assert recognizer.closed == 1


@pytest.mark.asyncio
async def test_image_without_numbers_is_empty(config, png_builder, fake_recognizer):
    recognizer = fake_recognizer(["Karibu shuleni"])
    assert await extract_contacts_from_file(
        UploadedDocument(png_builder(), None, "photo.jpg"), recognizer=recognizer, config=config
    ) == []


# ---------------------------------------------------------------------------
# Classification and progress
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_audio_upload_is_unsupported(config):
    with pytest.raises(UnsupportedFormat):
        await extract_contacts_from_file(UploadedDocument(b"ID3", "audio/mpeg", "song.mp3"), config=config)


@pytest.mark.asyncio
async def test_progress_callback_receives_phase_messages(config):
    events = []
    await extract_contacts_from_file(
        UploadedDocument(b"Phone\n0712345678\n", "text/csv", "list.csv"),
        progress_cb=lambda stage, message: events.append((stage, message)),
        config=config,
    )
    assert events[0] == ("processing", "Parsing CSV rows...")
    assert events[-1] == ("completed", "Found 1 contacts")


@pytest.mark.asyncio
async def test_progress_callback_reports_ocr_fallback(config, pdf_builder, fake_recognizer, fake_renderer):
    events = []
    await extract_contacts_from_file(
        UploadedDocument(pdf_builder([""]), "application/pdf", "scan.pdf"),
        recognizer=fake_recognizer(["0712345678"]),
        renderer=fake_renderer(),
        progress_cb=lambda stage, message: events.append(stage),
        config=config,
    )
    assert events == ["processing", "ocr_fallback", "completed"]
# Fin del archivo test_extraction_facade_integration.py
