"""Domain models for entry processing."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from orbit_worker.exceptions import JobValidationError


class EntryStatus(str, Enum):
    """Lifecycle status of a journal entry."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Job(BaseModel, frozen=True):
    """One processing request for a single entry."""

    entry_id: str = Field(min_length=1)
    audio_url: str = Field(min_length=1)
    user_id: str | None = None


class ProcessRequest(BaseModel):
    """Incoming body of a process request. Required fields are checked in to_job."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    entry_id: str | None = None
    audio_url: str | None = None
    user_id: str | None = None

    def to_job(self) -> Job:
        """
        Builds a Job from the request body.

        Raises:
            JobValidationError: If entry_id or audio_url is missing or empty.
        """
        missing = [
            name for name in ("entry_id", "audio_url") if not getattr(self, name)
        ]
        if missing:
            raise JobValidationError(missing)
        return Job(
            entry_id=self.entry_id, audio_url=self.audio_url, user_id=self.user_id
        )


class Segment(BaseModel, frozen=True):
    """A timed piece of recognized speech."""

    text: str = Field(validation_alias=AliasChoices("text", "speech"))


class PlainText(BaseModel, frozen=True):
    """Transcription engine output delivered as a single string."""

    kind: Literal["text"] = "text"
    text: str


class Segments(BaseModel, frozen=True):
    """Transcription engine output delivered as a list of segments."""

    kind: Literal["segments"] = "segments"
    segments: list[Segment]


Transcription = Annotated[PlainText | Segments, Field(discriminator="kind")]


class SummaryResult(BaseModel, frozen=True):
    """Summary and thematic insights extracted from a transcript."""

    summary: str
    insights: list[str] = Field(default_factory=list)


class EntryUpdate(BaseModel, frozen=True):
    """Fields written to an entry row. Unset fields are left untouched."""

    transcript: str | None = None
    summary: str | None = None
    key_insights: list[str] | None = None
    status: EntryStatus

    def to_record(self) -> dict:
        """Returns the JSON-ready column values to write."""
        return self.model_dump(mode="json", exclude_none=True)


class ProcessingResult(BaseModel, frozen=True):
    """Outcome of a successfully processed entry."""

    entry_id: str
    transcript_length: int
    summary_length: int


class ProcessingFailure(BaseModel):
    """
    Outcome of a failed entry.

    `error` is the failure that stopped the pipeline and is reported to the
    caller. `persistence_error` is set when marking the entry as failed also
    failed; it is logged but never reported.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    entry_id: str
    error: Exception
    persistence_error: Exception | None = None

    @property
    def details(self) -> str:
        return str(self.error)
