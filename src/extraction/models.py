"""Data models for transcript extraction results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Intent(StrEnum):
    """Whether a segment reads as something to do or something to keep."""

    TASK = "task"
    NOTE = "note"


class TaskPriority(StrEnum):
    """Priority a reviewer may attach to a task draft."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class IntentResult:
    """Outcome of intent classification for a single segment."""

    intent: Intent
    confidence: float


@dataclass(frozen=True)
class ParsedDate:
    """A resolved calendar date (``YYYY-MM-DD``) with its confidence."""

    iso_date: str
    confidence: float


@dataclass
class TaskDraft:
    """An unconfirmed task awaiting review."""

    id: str
    confidence: float
    title: str
    list_id: str
    notes: str | None = None
    due_date: str | None = None
    priority: TaskPriority | None = None
    tags: list[str] | None = None


@dataclass
class NoteDraft:
    """An unconfirmed note awaiting review."""

    id: str
    confidence: float
    title: str
    body: str
    folder_id: str
    tags: list[str] | None = None


@dataclass
class ExtractionResult:
    """Task and note drafts, each list in transcript order."""

    tasks: list[TaskDraft] = field(default_factory=list)
    notes: list[NoteDraft] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks) + len(self.notes)

    @property
    def is_empty(self) -> bool:
        return not self.tasks and not self.notes
