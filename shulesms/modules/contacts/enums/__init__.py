# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/enums

Public enums of the contacts module.
"""

from .container_kind_enum import ContainerKind

__all__ = ["ContainerKind"]
