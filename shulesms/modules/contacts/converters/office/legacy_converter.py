# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/office/legacy_converter.py

Conversion of legacy Office containers (.xls, .ods, .doc, .odt) to their
OOXML counterparts (.xlsx, .docx) through LibreOffice in headless mode.

- The upload is written to a private temporary directory; the converted file
  is read back as bytes and the directory is removed.
- Requires LibreOffice (`soffice`) on PATH or CONTACTS_SOFFICE_BIN.

Author: ShuleSMS
Date: 2026-10-19
"""

import logging
import os
import subprocess
import tempfile
from typing import Optional

from ...config import ContactsConfig, get_contacts_config
from ...errors import DecodeFailure

logger = logging.getLogger(__name__)


def convert_legacy_office(
    content: bytes,
    source_extension: str,
    target_format: str,
    filename: Optional[str] = None,
    config: Optional[ContactsConfig] = None,
) -> bytes:
    """
    Converts a legacy document to `target_format` ('xlsx' or 'docx').

    Args:
        content: Raw bytes of the legacy document
        source_extension: Extension of the upload, e.g. '.xls'
        target_format: LibreOffice filter target
        filename: Original name, for error reporting

    Returns:
        Bytes of the converted document

    Raises:
        DecodeFailure: if LibreOffice is missing, fails or times out
    """
    cfg = config or get_contacts_config()

    with tempfile.TemporaryDirectory(prefix="shulesms_") as workdir:
        source_path = os.path.join(workdir, "upload" + source_extension)
        output_path = os.path.join(workdir, "upload." + target_format)
        with open(source_path, "wb") as fh:
            fh.write(content)

        try:
            subprocess.run(
                [
                    cfg.soffice_bin,
                    "--headless",
                    "--convert-to", target_format,
                    "--outdir", workdir,
                    source_path,
                ],
                check=True,
                capture_output=True,
                timeout=cfg.soffice_timeout_sec,
            )
        except FileNotFoundError as e:
            raise DecodeFailure(f"LibreOffice not available ({cfg.soffice_bin})", filename) from e
        except subprocess.TimeoutExpired as e:
            raise DecodeFailure(f"LibreOffice conversion timed out after {cfg.soffice_timeout_sec}s", filename) from e
        except subprocess.CalledProcessError as e:
            raise DecodeFailure(f"LibreOffice conversion failed (exit {e.returncode})", filename) from e

        if not os.path.exists(output_path):
            raise DecodeFailure(f"LibreOffice produced no .{target_format} output", filename)

        with open(output_path, "rb") as fh:
            converted = fh.read()

    logger.info("Converted %s (%s) to .%s", filename or "<upload>", source_extension, target_format)
    return converted


__all__ = ["convert_legacy_office"]
# Fin del archivo legacy_converter.py
