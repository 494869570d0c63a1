# -*- coding: utf-8 -*-
from .word_converter import convert_word_to_lines

__all__ = ["convert_word_to_lines"]
