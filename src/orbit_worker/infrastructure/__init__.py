"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .faster_whisper_transcriber import FasterWhisperTranscriber
from .gemini_summarizer import GeminiSummarizer
from .http_audio_source import HttpAudioSource
from .sql_repository import SQLEntryRepository
from .supabase_repository import SupabaseEntryRepository

__all__ = [
    "AssemblyAITranscriber",
    "FasterWhisperTranscriber",
    "GeminiSummarizer",
    "HttpAudioSource",
    "SQLEntryRepository",
    "SupabaseEntryRepository",
]
