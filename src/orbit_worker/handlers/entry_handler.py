"""Handler for processing journal entries."""

import logging
import os
import re
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import urlparse

from orbit_worker.domain import (
    EntryStatus,
    EntryUpdate,
    Job,
    ProcessingFailure,
    ProcessingResult,
    normalize_transcript,
)
from orbit_worker.infrastructure.interfaces import (
    AudioSource,
    EntryRepository,
    Summarizer,
    TranscriptionService,
)

logger = logging.getLogger(__name__)

DEFAULT_AUDIO_SUFFIX = ".webm"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_AUDIO_SUFFIX_PATTERN = re.compile(r"^\.[A-Za-z0-9]{1,5}$")


class EntryHandler:
    """Orchestrates download, transcription, summarization and persistence."""

    def __init__(
        self,
        audio_source: AudioSource,
        transcriber: TranscriptionService,
        summarizer: Summarizer,
        repository: EntryRepository,
        temp_dir: str | None = None,
    ):
        self._audio_source = audio_source
        self._transcriber = transcriber
        self._summarizer = summarizer
        self._repository = repository
        self._temp_dir = temp_dir

    @property
    def is_ready(self) -> bool:
        return self._transcriber.is_ready

    def warm_up(self) -> None:
        """
        Loads the transcription engine.

        Raises:
            TranscriberLoadError: If the engine cannot be initialized.
        """
        self._transcriber.load()

    def process(self, job: Job) -> ProcessingResult | ProcessingFailure:
        """
        Processes one entry end to end.

        Any failure after validation marks the entry as failed. The attempt
        to do so is best effort: its own error is logged and recorded on the
        returned ProcessingFailure but does not replace the original error.

        Args:
            job: The validated job.

        Returns:
            ProcessingResult on success, ProcessingFailure otherwise.
        """
        logger.info(
            "Processing entry",
            extra={"entry_id": job.entry_id, "user_id": job.user_id},
        )
        try:
            return self._run(job)
        except Exception as e:
            logger.exception("Entry processing failed", extra={"entry_id": job.entry_id})
            persistence_error = self._mark_failed(job.entry_id)
            return ProcessingFailure(
                entry_id=job.entry_id, error=e, persistence_error=persistence_error
            )

    def _run(self, job: Job) -> ProcessingResult:
        audio_data = self._audio_source.download(job.audio_url)

        suffix = _audio_suffix(job.audio_url)
        with self._temporary_audio_file(job.entry_id, audio_data, suffix) as audio_path:
            transcription = self._transcriber.transcribe(audio_path)
        transcript = normalize_transcript(transcription)
        logger.info(
            "Transcript ready",
            extra={"entry_id": job.entry_id, "preview": transcript[:100]},
        )

        summary = self._summarizer.summarize(transcript)

        self._repository.update(
            job.entry_id,
            EntryUpdate(
                transcript=transcript,
                summary=summary.summary,
                key_insights=summary.insights,
                status=EntryStatus.COMPLETED,
            ),
        )

        logger.info(
            "Entry processed",
            extra={
                "entry_id": job.entry_id,
                "transcript_length": len(transcript),
                "summary_length": len(summary.summary),
                "insight_count": len(summary.insights),
            },
        )
        return ProcessingResult(
            entry_id=job.entry_id,
            transcript_length=len(transcript),
            summary_length=len(summary.summary),
        )

    def _mark_failed(self, entry_id: str) -> Exception | None:
        """Sets status=failed, returning the error instead of raising it."""
        try:
            self._repository.update(entry_id, EntryUpdate(status=EntryStatus.FAILED))
        except Exception as e:
            logger.exception(
                "Failed to mark entry as failed", extra={"entry_id": entry_id}
            )
            return e
        return None

    @contextmanager
    def _temporary_audio_file(
        self, entry_id: str, data: bytes, suffix: str
    ) -> Iterator[Path]:
        """Writes audio to a uniquely named temp file and always removes it."""
        prefix = f"temp_{_UNSAFE_FILENAME_CHARS.sub('_', entry_id)}_"
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=self._temp_dir)
        path = Path(name)
        try:
            with os.fdopen(fd, "wb") as temp_file:
                temp_file.write(data)
            yield path
        finally:
            path.unlink(missing_ok=True)


def _audio_suffix(audio_url: str) -> str:
    """Keeps the file extension of the URL so the decoder can sniff the format."""
    suffix = Path(urlparse(audio_url).path).suffix
    if _AUDIO_SUFFIX_PATTERN.match(suffix):
        return suffix.lower()
    return DEFAULT_AUDIO_SUFFIX
