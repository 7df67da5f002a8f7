"""Domain layer exports."""

from orbit_worker.domain.models import (
    EntryStatus,
    EntryUpdate,
    Job,
    PlainText,
    ProcessingFailure,
    ProcessingResult,
    ProcessRequest,
    Segment,
    Segments,
    SummaryResult,
    Transcription,
)
from orbit_worker.domain.summary import build_summary_prompt, parse_summary
from orbit_worker.domain.transcript import coerce_transcription, normalize_transcript

__all__ = [
    "EntryStatus",
    "EntryUpdate",
    "Job",
    "PlainText",
    "ProcessingFailure",
    "ProcessingResult",
    "ProcessRequest",
    "Segment",
    "Segments",
    "SummaryResult",
    "Transcription",
    "build_summary_prompt",
    "parse_summary",
    "coerce_transcription",
    "normalize_transcript",
]
