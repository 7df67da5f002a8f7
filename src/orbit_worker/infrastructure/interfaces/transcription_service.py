"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from orbit_worker.domain.models import Transcription


class TranscriptionService(ABC):
    """Abstract base class for speech-recognition backends."""

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """Whether load() has completed and transcribe() may be called."""

    @abstractmethod
    def load(self) -> None:
        """
        Initializes the engine. Must complete before the first transcription.

        Raises:
            TranscriberLoadError: If the engine cannot be initialized.
        """

    @abstractmethod
    def transcribe(self, audio_path: Path) -> Transcription:
        """
        Transcribes a local audio file.

        Args:
            audio_path: Path of the audio file on disk.

        Returns:
            Plain text or segment list produced by the engine.

        Raises:
            TranscriberNotReadyError: If load() has not completed.
            TranscriptionError: If transcription fails.
        """
