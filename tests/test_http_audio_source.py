import httpx
import pytest

from orbit_worker.exceptions import DownloadError
from orbit_worker.infrastructure import HttpAudioSource


def _source(handler) -> HttpAudioSource:
    return HttpAudioSource(httpx.Client(transport=httpx.MockTransport(handler)))


def test_download_returns_body():
    source = _source(lambda request: httpx.Response(200, content=b"RIFF-audio"))

    assert source.download("https://cdn.example.com/a.wav") == b"RIFF-audio"


def test_non_success_status_raises_with_status():
    source = _source(lambda request: httpx.Response(404))

    with pytest.raises(DownloadError, match="Failed to download audio: 404") as exc:
        source.download("https://cdn.example.com/missing.wav")

    assert exc.value.status_code == 404


def test_network_error_raises_download_error():
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    source = _source(fail)

    with pytest.raises(DownloadError) as exc:
        source.download("https://cdn.example.com/a.wav")

    assert exc.value.status_code is None
    assert isinstance(exc.value.cause, httpx.ConnectError)


def test_malformed_url_raises_download_error():
    source = _source(lambda request: httpx.Response(200, content=b"never sent"))

    with pytest.raises(DownloadError) as exc:
        source.download("https://cdn.example.com/a\n.wav")

    assert isinstance(exc.value.cause, httpx.InvalidURL)
