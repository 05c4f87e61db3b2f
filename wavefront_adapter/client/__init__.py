"""Module with abstract Wavefront client used by the metrics provider"""

import abc
from typing import Mapping

from httpx import Response

from wavefront_adapter.client.errors import (
    ErrorType,
    ClientError,
    BadRequestError,
    BadResponseError,
    TransportError,
    StatusError,
)
from wavefront_adapter.client.models import DataPoint, TimeSeries, QueryResult, ListResult

__all__ = [
    "WavefrontClient",
    "ErrorType",
    "ClientError",
    "BadRequestError",
    "BadResponseError",
    "TransportError",
    "StatusError",
    "DataPoint",
    "TimeSeries",
    "QueryResult",
    "ListResult",
]


class WavefrontClient(abc.ABC):
    """Capabilities of a Wavefront client"""

    @abc.abstractmethod
    def do(self, verb: str, endpoint: str, params: Mapping[str, str] = None) -> Response:
        """
        Sends authenticated request to `endpoint` relative to the Wavefront URL.
        Returns response with an open body on 2xx status, raises TransportError otherwise.
        """

    @abc.abstractmethod
    def list_metrics(self, prefix: str) -> list[str]:
        """Returns names of metrics starting with `prefix`"""

    @abc.abstractmethod
    def query(self, start: int, query: str) -> QueryResult:
        """Queries time series since `start` (seconds since epoch)"""
