"""Split a raw transcript into short, independently classifiable segments."""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"\s*\n\s*")
_WHITESPACE_RE = re.compile(r"\s+")
# Split on whitespace after terminal punctuation; the punctuation stays put.
_SENTENCE_BREAK_RE = re.compile(r"(?<=[.!?])\s+")
_CONNECTIVE_RE = re.compile(r"\b(?:and then|then|also)\b", re.IGNORECASE)


def normalize_segment(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_sentences(text: str) -> list[str]:
    """Split *text* into normalized sentences.

    Paragraph breaks behave like sentence breaks.  Text without terminal
    punctuation comes back as a single sentence.
    """
    text = _LINE_BREAK_RE.sub(". ", text.strip())
    pieces = (normalize_segment(piece) for piece in _SENTENCE_BREAK_RE.split(text))
    return [piece for piece in pieces if piece]


def segment(text: str, aggressive: bool = False) -> list[str]:
    """Split a transcript into segments, one per future draft.

    Args:
        text: The full recognized utterance for one recording.
        aggressive: Also split each sentence on "and then", "then" and
            "also" (case-insensitive, whole words).

    Returns:
        Non-empty normalized segments in transcript order.  Empty or
        whitespace-only input yields an empty list.
    """
    sentences = split_sentences(text)
    if not aggressive:
        return sentences

    segments: list[str] = []
    for sentence in sentences:
        parts = (normalize_segment(part) for part in _CONNECTIVE_RE.split(sentence))
        # A sentence made only of connectives is kept whole.
        segments.extend([part for part in parts if part] or [sentence])
    return segments
