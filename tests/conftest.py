from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from orbit_worker.domain import EntryUpdate, PlainText, SummaryResult, Transcription
from orbit_worker.exceptions import (
    EntryNotFoundError,
    PersistenceError,
    TranscriberNotReadyError,
)
from orbit_worker.handlers import EntryHandler
from orbit_worker.infrastructure.interfaces import (
    AudioSource,
    EntryRepository,
    Summarizer,
    TranscriptionService,
)
from orbit_worker.main import create_app


class FakeAudioSource(AudioSource):
    def __init__(self, data: bytes = b"fake-audio", error: Exception | None = None):
        self.data = data
        self.error = error
        self.calls: list[str] = []

    def download(self, url: str) -> bytes:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


class FakeTranscriber(TranscriptionService):
    def __init__(
        self,
        result: Transcription | None = None,
        error: Exception | None = None,
    ):
        self.result = result or PlainText(text="I had a good day today")
        self.error = error
        self.loaded = False
        self.paths: list[Path] = []
        self.contents: list[bytes] = []

    @property
    def is_ready(self) -> bool:
        return self.loaded

    def load(self) -> None:
        self.loaded = True

    def transcribe(self, audio_path: Path) -> Transcription:
        if not self.loaded:
            raise TranscriberNotReadyError("fake")
        self.paths.append(audio_path)
        self.contents.append(audio_path.read_bytes())
        if self.error is not None:
            raise self.error
        return self.result


class FakeSummarizer(Summarizer):
    def __init__(
        self,
        result: SummaryResult | None = None,
        error: Exception | None = None,
    ):
        self.result = result or SummaryResult(
            summary="A positive day.", insights=["gratitude"]
        )
        self.error = error
        self.calls: list[str] = []

    def summarize(self, transcript: str) -> SummaryResult:
        self.calls.append(transcript)
        if self.error is not None:
            raise self.error
        return self.result


class FakeRepository(EntryRepository):
    """In-memory entries table. Fails updates whose status is in fail_on."""

    def __init__(self, fail_on: tuple[str, ...] = ()):
        self.rows: dict[str, dict] = {}
        self.updates: list[tuple[str, EntryUpdate]] = []
        self.fail_on = fail_on

    def update(self, entry_id: str, update: EntryUpdate) -> None:
        self.updates.append((entry_id, update))
        if update.status.value in self.fail_on:
            raise PersistenceError(entry_id, cause=EntryNotFoundError(entry_id))
        self.rows.setdefault(entry_id, {}).update(update.to_record())


@pytest.fixture
def audio_source():
    return FakeAudioSource()


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def summarizer():
    return FakeSummarizer()


@pytest.fixture
def repository():
    return FakeRepository()


@pytest.fixture
def handler(audio_source, transcriber, summarizer, repository, tmp_path):
    entry_handler = EntryHandler(
        audio_source=audio_source,
        transcriber=transcriber,
        summarizer=summarizer,
        repository=repository,
        temp_dir=str(tmp_path),
    )
    entry_handler.warm_up()
    return entry_handler


@pytest.fixture
def client(handler):
    with TestClient(create_app(handler)) as test_client:
        yield test_client
