from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import assemblyai as aai
import pytest

from orbit_worker.domain import PlainText, Segment, Segments, normalize_transcript
from orbit_worker.exceptions import (
    TranscriberLoadError,
    TranscriberNotReadyError,
    TranscriptionError,
)
from orbit_worker.infrastructure import AssemblyAITranscriber, FasterWhisperTranscriber

AUDIO = Path("/tmp/temp_e1_abc.webm")


def test_whisper_not_ready_before_load():
    transcriber = FasterWhisperTranscriber()

    assert transcriber.is_ready is False
    with pytest.raises(TranscriberNotReadyError):
        transcriber.transcribe(AUDIO)


def test_whisper_load_builds_model_once():
    with patch(
        "orbit_worker.infrastructure.faster_whisper_transcriber.WhisperModel"
    ) as model_cls:
        transcriber = FasterWhisperTranscriber(model_size="small", device="cpu")
        transcriber.load()
        transcriber.load()

    model_cls.assert_called_once_with("small", device="cpu", compute_type="int8")
    assert transcriber.is_ready is True


def test_whisper_load_failure_raises():
    with patch(
        "orbit_worker.infrastructure.faster_whisper_transcriber.WhisperModel",
        side_effect=RuntimeError("no such model"),
    ):
        transcriber = FasterWhisperTranscriber(model_size="nope")
        with pytest.raises(TranscriberLoadError, match="no such model"):
            transcriber.load()

    assert transcriber.is_ready is False


def test_whisper_transcribe_returns_segments():
    model = MagicMock()
    model.transcribe.return_value = (
        iter([SimpleNamespace(text=" I had a"), SimpleNamespace(text=" good day today")]),
        SimpleNamespace(language="en"),
    )
    with patch(
        "orbit_worker.infrastructure.faster_whisper_transcriber.WhisperModel",
        return_value=model,
    ):
        transcriber = FasterWhisperTranscriber(language="en")
        transcriber.load()

    result = transcriber.transcribe(AUDIO)

    assert result == Segments(
        segments=[Segment(text=" I had a"), Segment(text=" good day today")]
    )
    args, kwargs = model.transcribe.call_args
    assert args == (str(AUDIO),)
    assert kwargs["language"] == "en"


def test_whisper_segments_without_text_fall_back_to_string():
    model = MagicMock()
    model.transcribe.return_value = (
        iter([SimpleNamespace(start=0.0, end=1.5)]),
        SimpleNamespace(language="en"),
    )
    with patch(
        "orbit_worker.infrastructure.faster_whisper_transcriber.WhisperModel",
        return_value=model,
    ):
        transcriber = FasterWhisperTranscriber()
        transcriber.load()

    result = transcriber.transcribe(AUDIO)

    assert isinstance(result, PlainText)
    assert "start=0.0" in result.text


def test_whisper_segment_dicts_with_speech_key():
    model = MagicMock()
    model.transcribe.return_value = (
        [{"speech": "a"}, {"speech": "b"}],
        SimpleNamespace(language="en"),
    )
    with patch(
        "orbit_worker.infrastructure.faster_whisper_transcriber.WhisperModel",
        return_value=model,
    ):
        transcriber = FasterWhisperTranscriber()
        transcriber.load()

    result = transcriber.transcribe(AUDIO)

    assert normalize_transcript(result) == "a b"


def test_whisper_transcribe_failure_wrapped():
    model = MagicMock()
    model.transcribe.side_effect = RuntimeError("corrupt audio")
    with patch(
        "orbit_worker.infrastructure.faster_whisper_transcriber.WhisperModel",
        return_value=model,
    ):
        transcriber = FasterWhisperTranscriber()
        transcriber.load()

    with pytest.raises(TranscriptionError, match="corrupt audio"):
        transcriber.transcribe(AUDIO)


def _assemblyai(transcript):
    sdk_transcriber = MagicMock()
    sdk_transcriber.transcribe.return_value = transcript
    with patch(
        "orbit_worker.infrastructure.assemblyai_transcriber.aai.Transcriber",
        return_value=sdk_transcriber,
    ):
        transcriber = AssemblyAITranscriber(api_key="test-key")
        transcriber.load()
    return transcriber, sdk_transcriber


def test_assemblyai_returns_plain_text():
    transcriber, sdk = _assemblyai(
        SimpleNamespace(status=aai.TranscriptStatus.completed, text="hello", error=None)
    )

    assert transcriber.transcribe(AUDIO) == PlainText(text="hello")
    sdk.transcribe.assert_called_once_with(str(AUDIO))


def test_assemblyai_error_status_raises():
    transcriber, _ = _assemblyai(
        SimpleNamespace(status=aai.TranscriptStatus.error, text=None, error="bad file")
    )

    with pytest.raises(TranscriptionError, match="bad file"):
        transcriber.transcribe(AUDIO)


def test_assemblyai_missing_text_raises():
    transcriber, _ = _assemblyai(
        SimpleNamespace(status=aai.TranscriptStatus.completed, text=None, error=None)
    )

    with pytest.raises(TranscriptionError, match="no output"):
        transcriber.transcribe(AUDIO)


def test_assemblyai_not_ready_before_load():
    with pytest.raises(TranscriberNotReadyError):
        AssemblyAITranscriber(api_key="k").transcribe(AUDIO)
