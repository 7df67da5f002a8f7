"""Entry processing endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from orbit_worker.dependencies import get_handler
from orbit_worker.domain import ProcessingFailure, ProcessRequest
from orbit_worker.exceptions import JobValidationError
from orbit_worker.handlers import EntryHandler
from orbit_worker.response_models import ErrorResponse, ProcessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["entries"])

HandlerDep = Annotated[EntryHandler, Depends(get_handler)]


@router.post(
    "/process",
    response_model=ProcessResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def process_entry(payload: ProcessRequest, handler: HandlerDep):
    """
    Transcribes, summarizes and stores one journal entry.

    Runs in the threadpool; each request is an independent pipeline run.
    """
    try:
        job = payload.to_job()
    except JobValidationError as e:
        logger.warning(
            "Rejected process request", extra={"missing_fields": e.missing_fields}
        )
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=str(e)).model_dump(exclude_none=True),
        )

    outcome = handler.process(job)

    if isinstance(outcome, ProcessingFailure):
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="processing_failed", details=outcome.details
            ).model_dump(),
        )

    return ProcessResponse(
        success=True,
        transcript_length=outcome.transcript_length,
        summary_length=outcome.summary_length,
    )
