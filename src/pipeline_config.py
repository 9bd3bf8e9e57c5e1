"""Extraction configuration: the ExtractionOptions dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.config import Settings


@dataclass(frozen=True)
class ExtractionOptions:
    """Immutable options for a single extraction call.

    ``aggressive`` additionally splits sentences on connectives such as
    "and then", trading precision for recall.  Every task draft is filed
    under ``default_task_list_id`` and every note draft under
    ``default_note_folder_id`` until a reviewer moves it.
    """

    default_task_list_id: str
    default_note_folder_id: str
    aggressive: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> ExtractionOptions:
        return cls(
            default_task_list_id=settings.default_task_list_id,
            default_note_folder_id=settings.default_note_folder_id,
            aggressive=settings.aggressive_extraction,
        )
