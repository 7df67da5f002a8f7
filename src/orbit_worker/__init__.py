from orbit_worker.exceptions import (
    ConfigurationError,
    DownloadError,
    JobValidationError,
    PersistenceError,
    SummarizationError,
    TranscriptionError,
)
from orbit_worker.logging import setup_logging

__all__ = [
    "setup_logging",
    "ConfigurationError",
    "DownloadError",
    "JobValidationError",
    "PersistenceError",
    "SummarizationError",
    "TranscriptionError",
]
