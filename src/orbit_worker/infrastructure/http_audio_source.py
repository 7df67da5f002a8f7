"""httpx implementation of the AudioSource interface."""

import logging

import httpx

from orbit_worker.exceptions import DownloadError

from .interfaces import AudioSource

logger = logging.getLogger(__name__)


class HttpAudioSource(AudioSource):
    """Downloads audio files over HTTP(S)."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def download(self, url: str) -> bytes:
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.exception("Audio download failed", extra={"audio_url": url})
            raise DownloadError(url, cause=e) from e

        if not response.is_success:
            logger.error(
                "Audio download returned error status",
                extra={"audio_url": url, "status_code": response.status_code},
            )
            raise DownloadError(url, status_code=response.status_code)

        data = response.content
        logger.info(
            "Audio downloaded", extra={"audio_url": url, "size_bytes": len(data)}
        )
        return data
