"""Gemini implementation of the Summarizer interface."""

import logging

from google import genai
from google.genai import errors as genai_errors

from orbit_worker.domain.models import SummaryResult
from orbit_worker.domain.summary import build_summary_prompt, parse_summary
from orbit_worker.exceptions import SummarizationError

from .interfaces import Summarizer

logger = logging.getLogger(__name__)


class GeminiSummarizer(Summarizer):
    """Summarizes transcripts using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def summarize(self, transcript: str) -> SummaryResult:
        """
        Asks Gemini for a summary and insights of a transcript.

        The model is asked to embed its answer as JSON in free text; parsing
        falls back to a truncated transcript when no usable JSON comes back.

        Raises:
            SummarizationError: If the Gemini API call fails.
        """
        prompt = build_summary_prompt(transcript)
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=prompt,
            )
        except genai_errors.APIError as e:
            logger.error(
                "Gemini API returned error status",
                extra={"status_code": e.code, "error": str(e)},
            )
            raise SummarizationError(
                f"Gemini API failed: {e.code}", status_code=e.code, cause=e
            ) from e
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise SummarizationError(f"Gemini API request failed: {e}", cause=e) from e

        result = parse_summary(response.text or "", transcript)
        logger.info(
            "Summary generated",
            extra={
                "summary_length": len(result.summary),
                "insight_count": len(result.insights),
            },
        )
        return result
