from __future__ import annotations

import re

from .models import ExtractedData
from .patterns import (
    CITY_DENYLIST,
    EMAIL_RE,
    LINKEDIN_RE,
    LOCATION_PATTERNS,
    NAME_PATTERNS,
    NAME_WORD_RE,
    PHONE_RE,
    PORTFOLIO_RE,
    US_STATE_CODES,
    WHITESPACE_RE,
)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def non_empty_lines(text: str) -> list[str]:
    return [line for line in text.split("\n") if line.strip()]


def _first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match is None:
        return None
    return match.group(0)


def find_email(clean_text: str) -> str | None:
    return _first_match(EMAIL_RE, clean_text)


def find_phone(clean_text: str) -> str | None:
    return _first_match(PHONE_RE, clean_text)


def find_linkedin(clean_text: str) -> str | None:
    return _first_match(LINKEDIN_RE, clean_text)


def find_portfolio(clean_text: str) -> str | None:
    return _first_match(PORTFOLIO_RE, clean_text)


def _is_valid_location(city: str, state: str, *, state_is_code: bool) -> bool:
    if state_is_code and state not in US_STATE_CODES:
        return False
    return city.lower() not in CITY_DENYLIST


def find_location(clean_text: str) -> str | None:
    """Return ``"City, State"`` for the first valid hit of the most specific pattern.

    Patterns are tried in order (``City, ST ZIP``, ``City, ST``, ``City, State``).
    A hit is skipped when its two-letter code is not a USPS code or its city is
    a resume header word such as "Education"; the ZIP code is never returned.
    """
    if not clean_text:
        return None

    for pattern, state_is_code in LOCATION_PATTERNS:
        for match in pattern.finditer(clean_text):
            city = (match.group(1) or "").strip()
            state = (match.group(2) or "").strip()
            if not city or not state:
                continue
            if not _is_valid_location(city, state, state_is_code=state_is_code):
                continue
            return f"{city}, {state}"
    return None


def _looks_like_name_line(line: str) -> bool:
    words = line.split()
    if not 2 <= len(words) <= 4:
        return False
    return all(NAME_WORD_RE.match(word) for word in words)


def find_full_name(text: str, lines: list[str] | None = None) -> str | None:
    for pattern in NAME_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1):
            return match.group(1).strip()

    if lines is None:
        lines = non_empty_lines(text)
    if not lines:
        return None
    first_line = lines[0].strip()
    if _looks_like_name_line(first_line):
        return first_line
    return None


def extract(text: str) -> ExtractedData:
    """Pull contact fields out of plain resume text.

    Each detector runs on its own; a miss leaves that field ``None``. Name
    detection reads the unmodified lines, every other detector reads the
    whitespace-collapsed text so line wrapping does not matter.
    """
    text = text or ""
    lines = non_empty_lines(text)
    clean_text = collapse_whitespace(text)

    return ExtractedData(
        full_name=find_full_name(text, lines),
        email=find_email(clean_text),
        phone=find_phone(clean_text),
        location=find_location(clean_text),
        linkedin=find_linkedin(clean_text),
        portfolio=find_portfolio(clean_text),
        raw_text=text,
    )
