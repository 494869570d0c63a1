# -*- coding: utf-8 -*-
from .csv_converter import convert_delimited_to_rows, parse_delimited_text

__all__ = ["convert_delimited_to_rows", "parse_delimited_text"]
