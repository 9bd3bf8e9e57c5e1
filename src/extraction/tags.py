"""Topical tag inference by keyword lookup."""

from __future__ import annotations

from types import MappingProxyType

TAG_KEYWORDS = MappingProxyType(
    {
        "home": ("home", "house", "apartment"),
        "work": ("work", "office", "project", "meeting"),
        "shopping": ("buy", "order", "shopping", "grocery", "groceries"),
        "health": ("doctor", "dentist", "gym", "workout"),
        "finance": ("pay", "invoice", "bill", "tax"),
    }
)


def infer_tags(segment: str) -> list[str] | None:
    """Return the tags whose keywords appear in *segment*.

    Keywords match as plain substrings of the lowercased segment.  Tags come
    back in table order.  Returns ``None`` rather than an empty list when
    nothing matched.
    """
    lowered = segment.lower()
    tags = [
        tag
        for tag, keywords in TAG_KEYWORDS.items()
        if any(keyword in lowered for keyword in keywords)
    ]
    return tags or None
