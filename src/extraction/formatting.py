"""Human-presentable titles and bodies for drafts."""

from __future__ import annotations

from src.extraction.intent import TASK_PHRASES
from src.extraction.segmenter import normalize_segment

NOTE_TITLE_MAX_CHARS = 40
ELLIPSIS = "…"


def task_title(segment: str) -> str:
    """Strip a leading task phrase ("remind me to", "i need to", ...).

    Phrases are tried in order of where they occur in the segment.  The first
    one followed by any text yields that text, without trailing sentence
    punctuation, as the title.  Otherwise the whole segment is the title.
    """
    text = normalize_segment(segment)
    lowered = text.lower()

    found: list[tuple[int, str]] = []
    for phrase in TASK_PHRASES:
        index = lowered.find(phrase)
        if index >= 0:
            found.append((index, phrase))

    for index, phrase in sorted(found):
        tail = text[index + len(phrase):].strip().rstrip(".!?").strip()
        if tail:
            return tail

    return text


def note_title(segment: str) -> str:
    text = normalize_segment(segment)
    if len(text) <= NOTE_TITLE_MAX_CHARS:
        return text
    return f"{text[:NOTE_TITLE_MAX_CHARS].strip()}{ELLIPSIS}"


def note_body(segment: str) -> str:
    return normalize_segment(segment)
