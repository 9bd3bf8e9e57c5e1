"""Plain text matching for finding drafts during review.

Ranking is deliberately simple and predictable: exact, prefix and substring
matches score fixed values, anything else scores by the share of query
tokens found in the text.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.extraction.models import NoteDraft, TaskDraft

T = TypeVar("T")

EXACT_SCORE = 1.0
PREFIX_SCORE = 0.95
SUBSTRING_SCORE = 0.85
MIN_TOKEN_RATIO = 0.5
DEFAULT_LIMIT = 50


@dataclass(frozen=True)
class ScoredMatch(Generic[T]):
    """An item paired with how well it matched a query."""

    item: T
    score: float


def score_text_match(haystack: str, query: str) -> float:
    """Score how well *haystack* matches *query*, in [0, 1].

    Comparison is case-insensitive on trimmed text.  An exact match scores
    1.0, a prefix 0.95, a substring 0.85.  Otherwise, when at least half of
    the query tokens appear in the text, the score is ``0.4 + 0.4 * ratio``;
    below that it is 0.
    """
    h = haystack.lower().strip()
    q = query.lower().strip()
    if not q or not h:
        return 0.0

    if h == q:
        return EXACT_SCORE
    if h.startswith(q):
        return PREFIX_SCORE
    if q in h:
        return SUBSTRING_SCORE

    tokens = q.split()
    hits = sum(1 for token in tokens if token in h)
    ratio = hits / len(tokens)
    return 0.4 + ratio * 0.4 if ratio >= MIN_TOKEN_RATIO else 0.0


def draft_text(draft: TaskDraft | NoteDraft) -> str:
    """Searchable text of a draft: its title plus notes or body."""
    if isinstance(draft, TaskDraft):
        extra = draft.notes or ""
    else:
        extra = draft.body
    return f"{draft.title} {extra}".strip()


def top_matches(
    items: Iterable[T],
    query: str,
    to_text: Callable[[T], str] = draft_text,  # type: ignore[assignment]
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredMatch[T]]:
    """Return the items matching *query*, best first.

    Items scoring 0 are dropped.  Equal scores keep their input order.

    Args:
        items: Candidates, drafts by default.
        query: Free-text search query.
        to_text: Maps an item to the text it is searched by.
        limit: Maximum number of matches returned.
    """
    scored: list[ScoredMatch[T]] = []
    for item in items:
        score = score_text_match(to_text(item), query)
        if score > 0:
            scored.append(ScoredMatch(item, score))

    scored.sort(key=lambda match: match.score, reverse=True)
    return scored[:limit]
