# -*- coding: utf-8 -*-
"""
ShuleSMS backend: contact extraction for school bulk-SMS campaigns.
"""

__version__ = "0.1.0"
