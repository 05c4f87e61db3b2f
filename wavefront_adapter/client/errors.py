"""Errors raised by the Wavefront client"""

import enum

import httpx


class ErrorType(enum.Enum):
    """Classification of client failures"""

    BAD_REQUEST = "bad_request"
    BAD_RESPONSE = "bad_response"
    TRANSPORT = "transport"

    def __str__(self):
        return str(self.value)


class ClientError(Exception):
    """Common exception for Wavefront client errors"""

    kind: ErrorType

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return f"{self.kind}: {self.msg}"


class BadRequestError(ClientError):
    """Caller supplied invalid input, nothing was sent"""

    kind = ErrorType.BAD_REQUEST


class BadResponseError(ClientError):
    """Wavefront answered with a body that could not be decoded"""

    kind = ErrorType.BAD_RESPONSE


class TransportError(ClientError):
    """Request did not complete, e.g. connection refused, DNS failure or timeout"""

    kind = ErrorType.TRANSPORT
    status_code: int | None = None


class StatusError(TransportError):
    """
    Wavefront answered with a non 2xx status.
    The response is kept for inspection, its body was already read and released.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.status_code = response.status_code
        self.status = f"{response.status_code} {response.reason_phrase}"
        super().__init__(f"error status={self.status} code={self.status_code}")
