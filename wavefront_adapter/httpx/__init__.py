"""Common classes for Httpx"""

# I change return type of HTTPX client to Result
# mypy: disable-error-code="override, return-value"

import time

from httpx import Client, ReadTimeout, Request, RequestError, SyncByteStream, USE_CLIENT_DEFAULT, Response

# Upper bound of a single round trip to Wavefront including the body, in seconds
DEFAULT_TIMEOUT = 10.0


class Result:
    """Result from HTTP request, either a response with a still open body or a transport error"""

    def __init__(self, response: Response = None, error: RequestError = None):
        self.response = response
        self.error = error

    @property
    def is_success(self) -> bool:
        """True, if the request completed with 2xx status"""
        return self.error is None and self.response.is_success

    def close(self):
        """Releases the response body, if there is any"""
        if self.response is not None:
            self.response.close()

    def __str__(self):
        if self.error is None:
            return f"Result[status_code={self.response.status_code}]"
        return f"Result[error={self.error}]"


class DeadlineStream(SyncByteStream):
    """Response body which fails with ReadTimeout once the round trip deadline (time.monotonic()) passes"""

    def __init__(self, stream: SyncByteStream, request: Request, deadline: float):
        self.stream = stream
        self.request = request
        self.deadline = deadline

    def __iter__(self):
        for chunk in self.stream:
            if time.monotonic() > self.deadline:
                raise ReadTimeout("timed out", request=self.request)
            yield chunk

    def close(self):
        self.stream.close()


class WavefrontHttpClient(Client):
    """
    Httpx client shared by all Wavefront clients of the process.
    Responses are streamed, so the caller has to close them,
    and transport failures are returned as Result instead of being raised.
    `timeout` bounds the whole round trip, reading of the body included.
    """

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT, follow_redirects=True, **kwargs):
        super().__init__(timeout=timeout, follow_redirects=follow_redirects, **kwargs)
        self.round_trip_timeout = timeout

    def request(
        self,
        method: str,
        url,
        *,
        params=None,
        headers=None,
        auth=USE_CLIENT_DEFAULT,
        extensions=None,
    ) -> Result:
        request = self.build_request(method, url, params=params, headers=headers, extensions=extensions)
        deadline = time.monotonic() + self.round_trip_timeout
        try:
            response = self.send(request, auth=auth, stream=True)
        except RequestError as e:
            return Result(error=e)

        if time.monotonic() > deadline:
            response.close()
            return Result(error=ReadTimeout("timed out", request=request))
        response.stream = DeadlineStream(response.stream, request, deadline)
        return Result(response=response)
