# text_parsing.py
from __future__ import annotations

import re
from datetime import date, datetime


DEFAULT_AGE = 30
DEFAULT_DOB = "1990-01-01"
NOT_SPECIFIED = "Not specified"

_BRACKETS_AND_QUOTES_RE = re.compile(r"[\[\]\"']")
_NUMERIC_TOKEN_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


def split_delimited(value: object, *, strip_brackets: bool = True) -> list[str]:
    """Split a comma-joined column into a list of trimmed, non-empty tokens.

    Some rows were written from a serialized array (`["Java", "SQL"]`), so brackets and
    quotes are removed before splitting unless `strip_brackets` is False.
    """

    if value is None:
        return []
    text = str(value)
    if strip_brackets:
        text = _BRACKETS_AND_QUOTES_RE.sub("", text)
    return [part.strip() for part in text.split(",") if part.strip()]


def split_lines(value: str | None) -> list[str]:
    if not value:
        return []
    return [line for line in value.split("\n") if line]


def parse_salary_lpa(value: object) -> float:
    if value is None:
        return 0.0
    match = _NUMERIC_TOKEN_RE.search(str(value))
    if not match:
        return 0.0
    return float(match.group(0))


def _parse_dob(value: str) -> date | None:
    raw = value.strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    try:
        return datetime.strptime(raw, "%m/%d/%Y").date()
    except ValueError:
        return None


def compute_age(dob: str | None, today: date | None = None) -> int:
    if not dob:
        return DEFAULT_AGE
    birth = _parse_dob(dob)
    if birth is None:
        return DEFAULT_AGE
    today = today or date.today()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def placeholder_avatar_url(name: str | None) -> str:
    initial = (name or "U")[0]
    return f"https://placehold.co/100x100/cccccc/444444?text={initial}"


def format_number(value: int | float | None) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
