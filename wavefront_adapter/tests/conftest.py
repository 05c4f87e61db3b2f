"""Root conftest"""

import json
import time

import httpx
import pytest

from wavefront_adapter.client.wavefront import DefaultWavefrontClient
from wavefront_adapter.httpx import WavefrontHttpClient

WAVEFRONT_URL = "https://example.wavefront.com"
TOKEN = "7c3b2a9e-wavefront-token"


class TrackedStream(httpx.SyncByteStream):
    """Response body which counts how many times it was released"""

    def __init__(self, content: bytes, error: Exception = None, chunk_size: int = None, delay: float = 0):
        self.content = content
        self.error = error
        self.chunk_size = chunk_size or max(len(content), 1)
        self.delay = delay
        self.close_count = 0

    def __iter__(self):
        for start in range(0, len(self.content), self.chunk_size):
            time.sleep(self.delay)
            yield self.content[start : start + self.chunk_size]
        if self.error is not None:
            raise self.error

    def close(self):
        self.close_count += 1


class FakeWavefront:
    """Request handler for httpx.MockTransport standing in for the Wavefront API"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.streams: list[TrackedStream] = []
        self.status_code = 200
        self.content = b"{}"
        self.responder = None
        self.error = None
        self.interruption = None
        self.delay = 0
        self.chunk_size = None
        self.chunk_delay = 0

    def reply(self, body=None, status_code=200, content: bytes = None):
        """Sets response for all following requests, `body` is serialized to JSON"""
        self.status_code = status_code
        self.content = content if content is not None else json.dumps(body).encode("utf-8")

    def fail(self, error: type[httpx.RequestError], message: str):
        """All following requests will fail with `error`"""
        self.error = (error, message)

    def interrupt(self, error: type[httpx.RequestError], message: str):
        """Bodies of all following responses will fail with `error` after the first chunk"""
        self.interruption = (error, message)

    def slow_body(self, chunk_size: int, delay: float):
        """Bodies of all following responses are sent in `chunk_size` pieces, `delay` seconds apart"""
        self.chunk_size = chunk_size
        self.chunk_delay = delay

    @property
    def last_request(self) -> httpx.Request:
        """The most recent request received"""
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            error, message = self.error
            raise error(message, request=request)

        time.sleep(self.delay)
        status_code, content = self.status_code, self.content
        headers = {"Content-Type": "application/json"}
        if self.responder is not None:
            status_code, body, *extra_headers = self.responder(request)
            content = json.dumps(body).encode("utf-8")
            for extra in extra_headers:
                headers.update(extra)

        interruption = None
        if self.interruption is not None:
            error, message = self.interruption
            interruption = error(message, request=request)

        stream = TrackedStream(content, interruption, self.chunk_size, self.chunk_delay)
        self.streams.append(stream)
        return httpx.Response(status_code, headers=headers, stream=stream)


@pytest.fixture
def wavefront():
    """Fake Wavefront API"""
    return FakeWavefront()


@pytest.fixture
def http_client(wavefront):
    """Shared httpx client which sends requests to the fake Wavefront API"""
    client = WavefrontHttpClient(transport=httpx.MockTransport(wavefront))
    yield client
    client.close()


@pytest.fixture
def base_url():
    """URL of the Wavefront instance"""
    return WAVEFRONT_URL


@pytest.fixture
def client(base_url, token, http_client):
    """Wavefront client under test"""
    return DefaultWavefrontClient(base_url, token, client=http_client)


@pytest.fixture
def token():
    """Wavefront API token"""
    return TOKEN
