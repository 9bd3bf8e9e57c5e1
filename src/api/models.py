"""Pydantic request/response schemas for the extraction API."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from src.extraction.models import TaskPriority


class ExtractRequest(BaseModel):
    """Request body for the /api/extract endpoint.

    Omitted options fall back to the application settings.
    """

    text: str
    aggressive: bool | None = None
    default_task_list_id: str | None = None
    default_note_folder_id: str | None = None
    reference_date: date | None = None


class TaskDraftResponse(BaseModel):
    """A single task draft in API responses."""

    id: str
    confidence: float
    title: str
    list_id: str
    notes: str | None = None
    due_date: str | None = None
    priority: TaskPriority | None = None
    tags: list[str] | None = None


class NoteDraftResponse(BaseModel):
    """A single note draft in API responses."""

    id: str
    confidence: float
    title: str
    body: str
    folder_id: str
    tags: list[str] | None = None


class ExtractResponse(BaseModel):
    """Response body for the /api/extract endpoint."""

    segments: int
    tasks: list[TaskDraftResponse] = []
    notes: list[NoteDraftResponse] = []
