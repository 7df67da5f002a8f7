"""Transcript normalization for heterogeneous transcription engine output."""

from collections.abc import Iterable, Mapping
from typing import Any

from orbit_worker.domain.models import PlainText, Segment, Segments, Transcription
from orbit_worker.exceptions import TranscriptionError

_SEGMENT_TEXT_FIELDS = ("speech", "text")


def normalize_transcript(transcription: Transcription) -> str:
    """
    Collapses engine output into one transcript string.

    Plain text is stripped. Segment texts are stripped, empty segments are
    dropped and the rest joined with single spaces.
    """
    match transcription:
        case PlainText(text=text):
            return text.strip()
        case Segments(segments=segments):
            parts = (segment.text.strip() for segment in segments)
            return " ".join(part for part in parts if part)
    raise TypeError(f"Unsupported transcription type: {type(transcription).__name__}")


def coerce_transcription(raw: Any, source: str = "engine output") -> Transcription:
    """
    Maps raw engine output onto a Transcription.

    Accepts a string, or an iterable of segments given as mappings or objects
    exposing a `speech` or `text` field. Anything else falls back to its
    string form.

    Raises:
        TranscriptionError: If the engine produced no output at all.
    """
    if raw is None:
        raise TranscriptionError(source, ValueError("engine returned no output"))
    if isinstance(raw, str):
        return PlainText(text=raw)
    if isinstance(raw, Iterable) and not isinstance(raw, (bytes, Mapping)):
        items = list(raw)
        texts = [_segment_text(item) for item in items]
        if all(text is not None for text in texts):
            return Segments(segments=[Segment(text=text) for text in texts])
        return PlainText(text=str(items))
    return PlainText(text=str(raw))


def _segment_text(item: Any) -> str | None:
    for field in _SEGMENT_TEXT_FIELDS:
        value = item.get(field) if isinstance(item, Mapping) else getattr(item, field, None)
        if isinstance(value, str):
            return value
    return None
