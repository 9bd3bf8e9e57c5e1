"""Keyword-based intent classification: is a segment a task or a note?"""

from __future__ import annotations

import re

from src.extraction.models import Intent, IntentResult

NOTE_PHRASES: tuple[str, ...] = ("note that", "remember that", "fyi", "idea", "thought")

TASK_PHRASES: tuple[str, ...] = (
    "remind me to",
    "i need to",
    "i have to",
    "i should",
    "todo",
    "to do",
)

TASK_VERBS: tuple[str, ...] = (
    "call",
    "email",
    "text",
    "message",
    "buy",
    "pick up",
    "schedule",
    "book",
    "cancel",
    "pay",
    "renew",
    "send",
    "submit",
    "order",
)

# A verb must stand between whitespace; trailing punctuation is allowed but
# hyphens and apostrophes ("text-based", "book's") are not.
_TASK_VERB_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"(?<!\S){re.escape(verb)}(?![^\s.,!?;:])") for verb in TASK_VERBS
]

PHRASE_CONFIDENCE = 0.85
VERB_CONFIDENCE = 0.7
DEFAULT_NOTE_CONFIDENCE = 0.55


def _has_task_verb(lowered: str) -> bool:
    return any(pattern.search(lowered) for pattern in _TASK_VERB_PATTERNS)


def classify(segment: str) -> IntentResult:
    """Classify a segment as a task or a note.

    Rules are checked in order and the first match wins: note phrases,
    task phrases, task verbs.  Anything else falls back to a low-confidence
    note, since a missed task costs less than a spurious one.
    """
    lowered = segment.lower()

    if any(phrase in lowered for phrase in NOTE_PHRASES):
        return IntentResult(Intent.NOTE, PHRASE_CONFIDENCE)
    if any(phrase in lowered for phrase in TASK_PHRASES):
        return IntentResult(Intent.TASK, PHRASE_CONFIDENCE)
    if _has_task_verb(lowered):
        return IntentResult(Intent.TASK, VERB_CONFIDENCE)

    return IntentResult(Intent.NOTE, DEFAULT_NOTE_CONFIDENCE)
