# -*- coding: utf-8 -*-
"""
shulesms/modules/contacts/services/phone_matcher.py

Phone number recognition and normalization.

Recognizes phone-number substrings in raw text through a fixed, ordered set of
regional patterns and normalizes every match to the canonical international
form ``+<country code><subscriber>``.

Supported formats:
    - Tanzania: +255XXXXXXXXX / 255XXXXXXXXX
    - Nigeria:  +234XXXXXXXXXX / 234XXXXXXXXXX
    - Kenya:    +254XXXXXXXXX / 254XXXXXXXXX
    - Local:    07XXXXXXXX / 06XXXXXXXX (default country: Tanzania)

No length or checksum validation happens on the normalized value other than
the minimum length applied to free-text matches (MIN_PHONE_LENGTH).

Author: ShuleSMS
Date: 2026-10-19
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Pattern, Sequence, Tuple

import phonenumbers
from phonenumbers import Leniency

DEFAULT_COUNTRY_CODE = "255"
DEFAULT_REGION = "TZ"
COUNTRY_CODES: Tuple[str, ...] = ("255", "254", "234")
LOCAL_MOBILE_PREFIXES: Tuple[str, ...] = ("07", "06")

# Normalized free-text matches shorter than this are discarded
MIN_PHONE_LENGTH = 10

# Characters people put between digit groups: "+255 712-345.678", "(0712) 345 678"
_SEPARATORS_RE = re.compile(r"[\s\-\.\(\)/\\_\u2010-\u2015]+")
_NOT_PHONE_CHARS_RE = re.compile(r"[^\d+]")
# A digit run interrupted only by separators, within one line
_CANDIDATE_RE = re.compile(r"\+?\(?\d[\d \t\-\.\(\)/\\_\u00a0\u2010-\u2015]*\d")
_DIGIT_GROUP_RE = re.compile(r"\+?\d+")


def _clean(raw: str) -> str:
    return _NOT_PHONE_CHARS_RE.sub("", raw or "")


def normalize_phone_number(raw: str) -> str:
    """
    Normalizes a raw phone string to international form.

    - Country code with ``+``       -> unchanged
    - Country code without ``+``    -> ``+`` prepended
    - Local trunk prefix (06/07)    -> ``0`` replaced by ``+255``
    - Anything else                 -> digits and ``+`` kept verbatim

    Idempotent: normalizing an already normalized value returns it unchanged.
    """
    cleaned = _clean(raw)

    for code in COUNTRY_CODES:
        if cleaned.startswith("+" + code):
            return cleaned
        if cleaned.startswith(code):
            return "+" + cleaned

    if cleaned.startswith(LOCAL_MOBILE_PREFIXES):
        return "+" + DEFAULT_COUNTRY_CODE + cleaned[1:]

    return cleaned


def _keep_international(raw: str) -> str:
    return _clean(raw)


def _prepend_plus(raw: str) -> str:
    return "+" + _clean(raw)


def _replace_trunk_prefix(raw: str) -> str:
    return "+" + DEFAULT_COUNTRY_CODE + _clean(raw)[1:]


@dataclass(frozen=True)
class PhonePattern:
    """A regional matching rule paired with its normalization rule."""
    name: str
    regex: Pattern[str]
    normalizer: Callable[[str], str]


DEFAULT_PHONE_PATTERNS: Tuple[PhonePattern, ...] = (
    PhonePattern("tz_international", re.compile(r"\+255\d{9}"), _keep_international),
    PhonePattern("tz_no_plus", re.compile(r"255\d{9}"), _prepend_plus),
    PhonePattern("ng_international", re.compile(r"\+234\d{10}"), _keep_international),
    PhonePattern("ng_no_plus", re.compile(r"234\d{10}"), _prepend_plus),
    PhonePattern("ke_international", re.compile(r"\+254\d{9}"), _keep_international),
    PhonePattern("ke_no_plus", re.compile(r"254\d{9}"), _prepend_plus),
    PhonePattern("local_mobile", re.compile(r"0[67]\d{8}"), _replace_trunk_prefix),
)


class PhonePatternMatcher:
    """
    Finds and normalizes phone numbers in free text.

    Every pattern runs over the original text first. Numbers broken by
    formatting ("+255 712 345 678") are then recovered two ways:

    - candidates found by ``phonenumbers.PhoneNumberMatcher`` are compacted
      and must match a pattern as a whole;
    - every separator-broken digit run on a line is compacted and patterns are
      tried at each digit-group start, keeping hits that also end on a group
      boundary ("1. 0712 345 678" yields the local number, while
      "0712345678 0713345678" never yields a number spanning both).

    Results are deduplicated by normalized value in first-seen order.
    """

    def __init__(
        self,
        patterns: Sequence[PhonePattern] = DEFAULT_PHONE_PATTERNS,
        min_length: int = MIN_PHONE_LENGTH,
        region: str = DEFAULT_REGION,
    ):
        self.patterns: Tuple[PhonePattern, ...] = tuple(patterns)
        self.min_length = min_length
        self.region = region

    def _fullmatches(self, compact: str) -> Iterator[Tuple[PhonePattern, str]]:
        for pattern in self.patterns:
            if pattern.regex.fullmatch(compact):
                yield pattern, compact

    def _library_candidates(self, text: str) -> Iterator[Tuple[PhonePattern, str]]:
        for match in phonenumbers.PhoneNumberMatcher(text, self.region, leniency=Leniency.POSSIBLE):
            yield from self._fullmatches(_SEPARATORS_RE.sub("", match.raw_string))

    def _grouped_runs(self, text: str) -> Iterator[Tuple[PhonePattern, str]]:
        for candidate in _CANDIDATE_RE.finditer(text):
            groups = _DIGIT_GROUP_RE.findall(candidate.group(0))
            if len(groups) < 2:
                continue

            compact = "".join(groups)
            starts: List[int] = []
            ends: set[int] = set()
            offset = 0
            for group in groups:
                starts.append(offset)
                offset += len(group)
                ends.add(offset)

            for start in starts:
                for pattern in self.patterns:
                    match = pattern.regex.match(compact, start)
                    if match and match.end() in ends:
                        yield pattern, match.group(0)

    def _raw_matches(self, text: str) -> Iterable[Tuple[PhonePattern, str]]:
        for pattern in self.patterns:
            for match in pattern.regex.finditer(text):
                yield pattern, match.group(0)

        yield from self._library_candidates(text)
        yield from self._grouped_runs(text)

    def extract(self, text: str) -> List[str]:
        if not text:
            return []

        numbers: List[str] = []
        seen: set[str] = set()
        for pattern, raw in self._raw_matches(text):
            normalized = pattern.normalizer(raw)
            if len(normalized) < self.min_length or normalized in seen:
                continue
            seen.add(normalized)
            numbers.append(normalized)
        return numbers

    def extract_from_lines(self, lines: Iterable[str]) -> List[str]:
        """Runs ``extract`` over several lines, deduplicating across them."""
        return self.extract("\n".join(lines))


def extract_phone_numbers(
    text: str,
    patterns: Sequence[PhonePattern] = DEFAULT_PHONE_PATTERNS,
) -> List[str]:
    """
    Extracts normalized phone numbers from text, first-seen order, no duplicates.

    Never raises; text without matches yields an empty list.
    """
    return PhonePatternMatcher(patterns).extract(text)


__all__ = [
    "DEFAULT_COUNTRY_CODE",
    "MIN_PHONE_LENGTH",
    "PhonePattern",
    "DEFAULT_PHONE_PATTERNS",
    "PhonePatternMatcher",
    "normalize_phone_number",
    "extract_phone_numbers",
]
