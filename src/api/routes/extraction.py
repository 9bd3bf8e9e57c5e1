"""Extraction endpoint: turn a finished transcript into review drafts."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from src.api.models import ExtractRequest, ExtractResponse, NoteDraftResponse, TaskDraftResponse
from src.config import settings
from src.extraction.engine import RulesEngine
from src.pipeline_config import ExtractionOptions

logger = logging.getLogger(__name__)

router = APIRouter()

engine = RulesEngine()


def _options_for(request: ExtractRequest) -> ExtractionOptions:
    defaults = ExtractionOptions.from_settings(settings)
    return ExtractionOptions(
        default_task_list_id=request.default_task_list_id or defaults.default_task_list_id,
        default_note_folder_id=request.default_note_folder_id or defaults.default_note_folder_id,
        aggressive=defaults.aggressive if request.aggressive is None else request.aggressive,
    )


@router.post("/api/extract", response_model=ExtractResponse)
async def extract_transcript(request: ExtractRequest) -> ExtractResponse:
    """Extract task and note drafts from a transcript.

    Nothing is stored: the drafts are returned for review, and persisting
    the accepted ones is up to the caller.
    """
    options = _options_for(request)
    result = engine.extract(request.text, options, now=request.reference_date)
    logger.info(
        "Extracted %d tasks and %d notes (aggressive=%s)",
        len(result.tasks),
        len(result.notes),
        options.aggressive,
    )

    return ExtractResponse(
        segments=len(result),
        tasks=[
            TaskDraftResponse(
                id=t.id,
                confidence=t.confidence,
                title=t.title,
                list_id=t.list_id,
                notes=t.notes,
                due_date=t.due_date,
                priority=t.priority,
                tags=t.tags,
            )
            for t in result.tasks
        ],
        notes=[
            NoteDraftResponse(
                id=n.id,
                confidence=n.confidence,
                title=n.title,
                body=n.body,
                folder_id=n.folder_id,
                tags=n.tags,
            )
            for n in result.notes
        ],
    )
