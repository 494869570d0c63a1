# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/services/recipients.py

Hand-off helpers between extracted contacts and the messaging collaborator.

The SMS gateway (Briq) expects international numbers without the leading
``+`` (e.g. ``255712345678``).

Author: ShuleSMS
Date: 2026-10-19
"""

from typing import Iterable, List

from .contact_record import ContactRecord


def unique_recipients(contacts: Iterable[ContactRecord]) -> List[str]:
    """Phone numbers of the given contacts, first-seen order, no duplicates."""
    return list(dict.fromkeys(c.phone_number for c in contacts if c.phone_number))


def to_gateway_recipients(phone_numbers: Iterable[str]) -> List[str]:
    """Strips the leading ``+`` expected by the gateway; keeps order, drops duplicates."""
    stripped = (n[1:] if n.startswith("+") else n for n in phone_numbers if n)
    return list(dict.fromkeys(stripped))


__all__ = ["unique_recipients", "to_gateway_recipients"]
