"""Prompt building and response parsing for transcript summarization."""

import json
import logging
import re

from pydantic import ValidationError

from orbit_worker.domain.models import SummaryResult

logger = logging.getLogger(__name__)

FALLBACK_SUMMARY_LENGTH = 200

SUMMARY_PROMPT_TEMPLATE = """Analyze this journal entry and provide:
1. A brief summary (2-3 sentences)
2. 3-5 key insights or themes

Transcript:
{transcript}

Format your response as JSON:
{{
  "summary": "...",
  "insights": ["insight1", "insight2", ...]
}}"""

_JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


def build_summary_prompt(transcript: str) -> str:
    """Fills the summary prompt template with the transcript."""
    return SUMMARY_PROMPT_TEMPLATE.format(transcript=transcript)


def fallback_summary(transcript: str) -> SummaryResult:
    """Summary used when the model answer holds no usable JSON."""
    return SummaryResult(summary=transcript[:FALLBACK_SUMMARY_LENGTH], insights=[])


def parse_summary(response_text: str, transcript: str) -> SummaryResult:
    """
    Extracts the JSON summary embedded in a model answer.

    The span from the first "{" to the last "}" is parsed as JSON and
    validated as a SummaryResult. When there is no such span, or it does not
    parse or validate, the transcript fallback is returned instead.

    Args:
        response_text: Free-text answer of the model.
        transcript: The transcript that was summarized.

    Returns:
        SummaryResult with summary and insights.
    """
    match = _JSON_OBJECT_PATTERN.search(response_text or "")
    if match is None:
        logger.warning("No JSON object found in summary response")
        return fallback_summary(transcript)

    try:
        payload = json.loads(match.group(0))
        return SummaryResult.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning(
            "Summary response could not be parsed", extra={"error": str(e)}
        )
        return fallback_summary(transcript)
