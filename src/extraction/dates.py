"""Best-effort due date resolution from natural-language snippets.

Deliberately conservative: it is better to miss a date than to mis-schedule
one, so only a handful of relative expressions are recognised and numeric
dates are never guessed.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from src.extraction.models import ParsedDate

_TODAY_RE = re.compile(r"\btoday\b", re.IGNORECASE)
_TOMORROW_RE = re.compile(r"\btomorrow\b", re.IGNORECASE)
_NEXT_WEEK_RE = re.compile(r"\bnext week\b", re.IGNORECASE)
_WEEKDAY_RE = re.compile(
    r"\b(next\s+)?(monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b",
    re.IGNORECASE,
)

# Same numbering as date.weekday(): Monday is 0.
WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

EXPLICIT_DAY_CONFIDENCE = 0.9
NEXT_WEEK_CONFIDENCE = 0.6
WEEKDAY_CONFIDENCE = 0.8
NEXT_WEEKDAY_CONFIDENCE = 0.7


def _as_date(reference: date | datetime) -> date:
    if isinstance(reference, datetime):
        # Aware times are read on the local calendar.
        if reference.tzinfo is not None:
            reference = reference.astimezone()
        return reference.date()
    return reference


def next_weekday(reference: date, weekday: int, skip_week: bool = False) -> date:
    """Return the first *weekday* strictly after *reference*.

    A reference that already falls on *weekday* rolls forward a full week.
    With *skip_week* a further seven days are added.
    """
    delta = (weekday - reference.weekday()) % 7 or 7
    if skip_week:
        delta += 7
    return reference + timedelta(days=delta)


def resolve_due_date(segment: str, reference: date | datetime) -> ParsedDate | None:
    """Resolve a due date mentioned in *segment* relative to *reference*.

    Args:
        segment: A single transcript segment.
        reference: The "now" the segment is interpreted against.  Only the
            calendar date matters.

    Returns:
        The resolved date and its confidence, or ``None`` if no supported
        expression was found or the date would fall past ``date.max``.
    """
    try:
        return _match_due_date(segment, _as_date(reference))
    except OverflowError:
        return None


def _match_due_date(segment: str, today: date) -> ParsedDate | None:
    if _TODAY_RE.search(segment):
        return ParsedDate(today.isoformat(), EXPLICIT_DAY_CONFIDENCE)
    if _TOMORROW_RE.search(segment):
        return ParsedDate((today + timedelta(days=1)).isoformat(), EXPLICIT_DAY_CONFIDENCE)
    if _NEXT_WEEK_RE.search(segment):
        return ParsedDate((today + timedelta(days=7)).isoformat(), NEXT_WEEK_CONFIDENCE)

    match = _WEEKDAY_RE.search(segment)
    if match:
        skip_week = match.group(1) is not None
        due = next_weekday(today, WEEKDAYS[match.group(2).lower()], skip_week)
        confidence = NEXT_WEEKDAY_CONFIDENCE if skip_week else WEEKDAY_CONFIDENCE
        return ParsedDate(due.isoformat(), confidence)

    return None
