# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters/image/image_preprocessing.py

Image preparation before OCR.

Phone photos arrive rotated (EXIF orientation) and at 12+ megapixels;
both hurt Tesseract and memory. Every image is upright-corrected,
converted to RGB and downscaled so its longest edge is at most
IMAGE_MAX_EDGE_PX. Smaller images are left at their size.

Author: ShuleSMS
Date: 2026-10-19
"""

import io
import logging
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from ...errors import DecodeFailure

logger = logging.getLogger(__name__)

IMAGE_MAX_EDGE_PX = 2000


def prepare_for_ocr(image: Image.Image) -> Image.Image:
    """Upright, RGB, longest edge capped. Returns a new image."""
    prepared = ImageOps.exif_transpose(image)
    if prepared.mode != "RGB":
        prepared = prepared.convert("RGB")

    if max(prepared.size) > IMAGE_MAX_EDGE_PX:
        original_size = prepared.size
        prepared.thumbnail((IMAGE_MAX_EDGE_PX, IMAGE_MAX_EDGE_PX), Image.Resampling.LANCZOS)
        logger.debug("Downscaled image %s -> %s", original_size, prepared.size)

    return prepared


def load_image_for_ocr(content: bytes, filename: Optional[str] = None) -> Image.Image:
    """
    Decodes image bytes and prepares them for OCR.

    Raises:
        DecodeFailure: unreadable, unsupported or oversized (decompression bomb)
            image data
    """
    try:
        with Image.open(io.BytesIO(content)) as image:
            image.load()
            return prepare_for_ocr(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeFailure(f"Cannot read image: {e}", filename) from e


__all__ = ["IMAGE_MAX_EDGE_PX", "prepare_for_ocr", "load_image_for_ocr"]
