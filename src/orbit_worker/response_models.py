"""Response models for the worker API."""

from datetime import datetime

from pydantic import BaseModel


class ProcessResponse(BaseModel):
    """Response returned after an entry was processed."""

    success: bool = True
    transcript_length: int
    summary_length: int


class ErrorResponse(BaseModel):
    """Error body returned on client or processing failures."""

    error: str
    details: str | list | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime
