"""faster-whisper implementation of the TranscriptionService interface."""

import logging
from pathlib import Path

from faster_whisper import WhisperModel

from orbit_worker.domain.models import Transcription
from orbit_worker.domain.transcript import coerce_transcription
from orbit_worker.exceptions import (
    TranscriberLoadError,
    TranscriberNotReadyError,
    TranscriptionError,
)

from .interfaces import TranscriptionService

logger = logging.getLogger(__name__)


class FasterWhisperTranscriber(TranscriptionService):
    """Transcribes audio locally with a Whisper model."""

    engine_name = "faster-whisper"

    def __init__(
        self,
        model_size: str = "small",
        language: str | None = "en",
        device: str = "cpu",
        compute_type: str = "int8",
        beam_size: int = 5,
    ):
        self._model_size = model_size
        self._language = language
        self._device = device
        self._compute_type = compute_type
        self._beam_size = beam_size
        self._model: WhisperModel | None = None

    @property
    def is_ready(self) -> bool:
        return self._model is not None

    def load(self) -> None:
        if self._model is not None:
            return
        try:
            self._model = WhisperModel(
                self._model_size, device=self._device, compute_type=self._compute_type
            )
        except Exception as e:
            logger.exception(
                "Whisper model failed to load", extra={"model_size": self._model_size}
            )
            raise TranscriberLoadError(self.engine_name, e) from e
        logger.info(
            "Whisper model loaded",
            extra={"model_size": self._model_size, "device": self._device},
        )

    def transcribe(self, audio_path: Path) -> Transcription:
        """
        Transcribes an audio file into a segment list.

        The model yields segments lazily, so decoding happens while the
        generator is consumed by coerce_transcription inside the error
        boundary.
        """
        if self._model is None:
            raise TranscriberNotReadyError(self.engine_name)
        try:
            raw_segments, info = self._model.transcribe(
                str(audio_path),
                beam_size=self._beam_size,
                language=self._language,
                task="transcribe",
            )
            transcription = coerce_transcription(raw_segments, audio_path.name)
        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception(
                "Whisper transcription failed", extra={"audio_path": str(audio_path)}
            )
            raise TranscriptionError(audio_path.name, e) from e

        logger.info(
            "Audio transcription successful",
            extra={"kind": transcription.kind, "language": info.language},
        )
        return transcription
