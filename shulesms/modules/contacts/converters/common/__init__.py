# -*- coding: utf-8 -*-
from .dispatcher_core import ContainerRouter, DispatcherConfig

__all__ = ["ContainerRouter", "DispatcherConfig"]
