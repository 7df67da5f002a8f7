"""Custom exceptions for the orbit worker."""


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class JobValidationError(Exception):
    """Raised when a job request is missing required fields."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__("entry_id and audio_url required")


class DownloadError(Exception):
    """Raised when the audio file cannot be downloaded."""

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.url = url
        self.status_code = status_code
        self.cause = cause
        if status_code is not None:
            message = f"Failed to download audio: {status_code}"
        else:
            message = f"Failed to download audio from '{url}': {cause}"
        super().__init__(message)


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        message = f"Failed to transcribe audio file '{file_name}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class TranscriberNotReadyError(Exception):
    """Raised when transcription is requested before the engine is loaded."""

    def __init__(self, engine: str):
        self.engine = engine
        super().__init__(f"Transcription engine '{engine}' is not loaded")


class TranscriberLoadError(Exception):
    """Raised when the transcription engine fails to initialize."""

    def __init__(self, engine: str, cause: Exception | None = None):
        self.engine = engine
        self.cause = cause
        super().__init__(f"Failed to load transcription engine '{engine}': {cause}")


class SummarizationError(Exception):
    """Raised when the summarization API call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class EntryNotFoundError(Exception):
    """Raised when an update matches no entry row."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Entry '{entry_id}' not found")


class PersistenceError(Exception):
    """Raised when writing an entry to the backend store fails."""

    def __init__(self, entry_id: str, cause: Exception | None = None):
        self.entry_id = entry_id
        self.cause = cause
        super().__init__(f"Failed to update entry '{entry_id}': {cause}")
