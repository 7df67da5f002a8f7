"""AssemblyAI implementation of the TranscriptionService interface."""

import logging
from pathlib import Path

import assemblyai as aai

from orbit_worker.domain.models import Transcription
from orbit_worker.domain.transcript import coerce_transcription
from orbit_worker.exceptions import (
    TranscriberLoadError,
    TranscriberNotReadyError,
    TranscriptionError,
)

from .interfaces import TranscriptionService

logger = logging.getLogger(__name__)


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    engine_name = "assemblyai"

    def __init__(self, api_key: str, language_code: str | None = "en"):
        self._api_key = api_key
        self._language_code = language_code
        self._transcriber: aai.Transcriber | None = None

    @property
    def is_ready(self) -> bool:
        return self._transcriber is not None

    def load(self) -> None:
        if self._transcriber is not None:
            return
        try:
            aai.settings.api_key = self._api_key
            config = aai.TranscriptionConfig(language_code=self._language_code)
            self._transcriber = aai.Transcriber(config=config)
        except Exception as e:
            logger.exception("AssemblyAI client failed to initialize")
            raise TranscriberLoadError(self.engine_name, e) from e
        logger.info("AssemblyAI transcriber ready")

    def transcribe(self, audio_path: Path) -> Transcription:
        """Uploads the audio file to AssemblyAI and waits for the transcript."""
        if self._transcriber is None:
            raise TranscriberNotReadyError(self.engine_name)
        try:
            transcription = self._transcriber.transcribe(str(audio_path))

            if transcription.status == aai.TranscriptStatus.error:
                raise TranscriptionError(
                    audio_path.name,
                    Exception(transcription.error),
                )

            result = coerce_transcription(transcription.text, audio_path.name)

            logger.info(
                "Audio transcription successful",
                extra={"transcript_length": len(transcription.text)},
            )
            return result

        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError(audio_path.name, e) from e
