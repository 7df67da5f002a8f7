"""Infrastructure interface exports."""

from .audio_source import AudioSource
from .entry_repository import EntryRepository
from .summarizer import Summarizer
from .transcription_service import TranscriptionService

__all__ = ["AudioSource", "EntryRepository", "Summarizer", "TranscriptionService"]
