"""Abstract interface for fetching audio payloads."""

from abc import ABC, abstractmethod


class AudioSource(ABC):
    """Abstract base class for audio download backends."""

    @abstractmethod
    def download(self, url: str) -> bytes:
        """
        Downloads an audio file into memory.

        Args:
            url: Location of the audio file.

        Returns:
            The audio file contents as bytes.

        Raises:
            DownloadError: If the file cannot be fetched.
        """
