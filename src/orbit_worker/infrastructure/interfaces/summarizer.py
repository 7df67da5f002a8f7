"""Abstract interface for transcript summarization."""

from abc import ABC, abstractmethod

from orbit_worker.domain.models import SummaryResult


class Summarizer(ABC):
    """Abstract base class for LLM summarization backends."""

    @abstractmethod
    def summarize(self, transcript: str) -> SummaryResult:
        """
        Summarizes a transcript and extracts key insights.

        Args:
            transcript: The transcript text to summarize.

        Returns:
            SummaryResult with summary and insights.

        Raises:
            SummarizationError: If the LLM call fails.
        """
