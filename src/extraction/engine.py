"""Rule-based extraction of task and note drafts from a transcript."""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date, datetime

from src.extraction.dates import resolve_due_date
from src.extraction.formatting import note_body, note_title, task_title
from src.extraction.intent import classify
from src.extraction.models import ExtractionResult, Intent, NoteDraft, TaskDraft
from src.extraction.segmenter import segment
from src.extraction.tags import infer_tags
from src.pipeline_config import ExtractionOptions

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class ExtractionEngine(ABC):
    """Turns a finished transcript into drafts for human review."""

    @abstractmethod
    def extract(
        self,
        text: str,
        options: ExtractionOptions,
        now: date | datetime | None = None,
    ) -> ExtractionResult:
        raise NotImplementedError


class RulesEngine(ExtractionEngine):
    """Keyword heuristics: segment, classify, tag, date, format.

    Each segment yields exactly one draft, either a task or a note.  The
    engine keeps no state between calls.

    Args:
        id_factory: Produces a fresh identifier for every draft.
        clock: Supplies the reference time when ``extract`` is called
            without ``now``.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.id_factory = id_factory
        self.clock = clock

    def extract(
        self,
        text: str,
        options: ExtractionOptions,
        now: date | datetime | None = None,
    ) -> ExtractionResult:
        """Extract task and note drafts from *text*.

        Args:
            text: The full transcript of one recording.
            options: Segmentation mode and default list/folder assignment.
            now: Reference time for due dates.  Defaults to the engine clock.

        Returns:
            An ExtractionResult with tasks and notes in transcript order.
        """
        reference = now if now is not None else self.clock()
        result = ExtractionResult()
        segments = segment(text, options.aggressive)

        for seg in segments:
            classification = classify(seg)
            tags = infer_tags(seg)

            if classification.intent is Intent.TASK:
                due = resolve_due_date(seg, reference)
                result.tasks.append(
                    TaskDraft(
                        id=self.id_factory(),
                        confidence=classification.confidence,
                        title=task_title(seg),
                        list_id=options.default_task_list_id,
                        due_date=due.iso_date if due else None,
                        tags=tags,
                    )
                )
            else:
                result.notes.append(
                    NoteDraft(
                        id=self.id_factory(),
                        confidence=classification.confidence,
                        title=note_title(seg),
                        body=note_body(seg),
                        folder_id=options.default_note_folder_id,
                        tags=tags,
                    )
                )

        logger.debug(
            "Extracted %d tasks and %d notes from %d segments",
            len(result.tasks),
            len(result.notes),
            len(segments),
        )
        return result


def extract(
    text: str,
    options: ExtractionOptions,
    now: date | datetime | None = None,
) -> ExtractionResult:
    """Extract drafts with a default :class:`RulesEngine`."""
    return RulesEngine().extract(text, options, now=now)
