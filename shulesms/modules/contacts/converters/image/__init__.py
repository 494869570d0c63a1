# -*- coding: utf-8 -*-
from .image_preprocessing import IMAGE_MAX_EDGE_PX, load_image_for_ocr, prepare_for_ocr

__all__ = ["IMAGE_MAX_EDGE_PX", "load_image_for_ocr", "prepare_for_ocr"]
