# -*- coding: utf-8 -*-
from .excel_converter import convert_workbook_to_rows

__all__ = ["convert_workbook_to_rows"]
