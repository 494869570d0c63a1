# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/converters

Format adapters: turn uploaded bytes into a CellGrid (row formats), a
LineSequence (line formats) or raw text / images for OCR.
"""
