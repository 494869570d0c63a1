# -*- coding: utf-8 -*-
from .ocr_engine import TesseractRecognizer, TextRecognizer, configure_tesseract

__all__ = ["TextRecognizer", "TesseractRecognizer", "configure_tesseract"]
