# -*- coding: utf-8 -*-
from .legacy_converter import convert_legacy_office

__all__ = ["convert_legacy_office"]
