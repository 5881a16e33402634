from __future__ import annotations

import re

# re.ASCII keeps \b and \d to ASCII word characters and digits, so an accented
# letter right after a match does not cancel the word boundary.
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII)
PHONE_RE = re.compile(r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}\b", re.ASCII)
LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9-]+", re.IGNORECASE)
PORTFOLIO_RE = re.compile(
    r"(?:https?://)?(?:www\.)?(?:portfolio|github|behance)\.(?:com|io|org)"
    r"/[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]+",
    re.IGNORECASE,
)

# A place name is at most five capitalized words.
_PLACE = r"[A-Z][a-z]+(?:\s[A-Z][a-z]+){0,4}"
_CITY = rf"({_PLACE})"

# Ordered from most to least specific; the first pattern with a valid hit wins.
LOCATION_PATTERNS: tuple[tuple[re.Pattern[str], bool], ...] = (
    # San Francisco, CA 94102
    (re.compile(rf"\b{_CITY},\s*([A-Z]{{2}})\s+\d{{5}}(?:-\d{{4}})?\b", re.ASCII), True),
    # San Francisco, CA
    (re.compile(rf"\b{_CITY},\s*([A-Z]{{2}})\b", re.ASCII), True),
    # San Francisco, California
    (re.compile(rf"\b{_CITY},\s*({_PLACE})\b", re.ASCII), False),
)

US_STATE_CODES = frozenset(
    {
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
        "DC",
    }
)

# Section headers and contact labels that look like "City, ST" when followed by a comma.
CITY_DENYLIST = frozenset(
    {
        "dear",
        "phone",
        "email",
        "address",
        "linkedin",
        "summary",
        "objective",
        "experience",
        "education",
        "skills",
    }
)

# Horizontal whitespace only, so a name never runs onto the next line.
_HSPACE = r"[^\S\r\n]"

NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Jane Doe / Mary Ann Smith
    re.compile(rf"^([A-Z][a-z]+ [A-Z][a-z]+(?: [A-Z][a-z]+)*)", re.MULTILINE),
    # John Q. Public
    re.compile(rf"^([A-Z][a-z]+{_HSPACE}+[A-Z]\.?{_HSPACE}+[A-Z][a-z]+)", re.MULTILINE),
    # Jane    Doe
    re.compile(rf"^([A-Z][a-z]+{_HSPACE}+[A-Z][a-z]+)", re.MULTILINE),
)

NAME_WORD_RE = re.compile(r"^[A-Z][a-z]*$")
WHITESPACE_RE = re.compile(r"\s+")
