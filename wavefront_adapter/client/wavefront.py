"""Wavefront client talking to the Wavefront query API"""

import logging
import posixpath
from dataclasses import dataclass, field
from typing import Mapping, Union

from httpx import URL, InvalidURL, RequestError, Response
from pydantic import ValidationError

from wavefront_adapter.client import WavefrontClient
from wavefront_adapter.client.errors import BadRequestError, BadResponseError, StatusError, TransportError
from wavefront_adapter.client.models import ListResult, QueryResult
from wavefront_adapter.httpx import WavefrontHttpClient
from wavefront_adapter.httpx.auth import BearerTokenAuth
from wavefront_adapter.logger import TRACE

logger = logging.getLogger(__name__)

CHART_ENDPOINT = "/api/v2/chart/api"
METRICS_LIST_ENDPOINT = "/chart/metrics/list"
METRICS_LIST_LIMIT = 150

METRIC_KEY = "m"
LIMIT_KEY = "l"
QUERY_KEY = "q"
START_TIME = "s"
GRANULARITY = "g"
OUTSIDE_SERIES = "i"


def join_path(base: str, endpoint: str) -> str:
    """Joins `endpoint` onto `base` path, empty and dot segments are removed"""
    segments = [segment for segment in f"{base}/{endpoint}".split("/") if segment]
    return posixpath.normpath("/" + "/".join(segments))


@dataclass(frozen=True)
class ClientConfig:
    """Wavefront URL of the form https://INSTANCE.wavefront.com and API token with permissions to query points"""

    base_url: URL
    token: str = field(repr=False)

    def __post_init__(self):
        try:
            url = URL(str(self.base_url))
        except InvalidURL as e:
            raise ValueError(f"Unable to parse Wavefront URL: {e}") from e
        if not url.is_absolute_url or url.scheme not in ("http", "https"):
            raise ValueError(f"Wavefront URL must be an absolute http(s) URL, got '{self.base_url}'")
        if not self.token:
            raise ValueError("Wavefront API token must not be empty")
        object.__setattr__(self, "base_url", url)


class DefaultWavefrontClient(WavefrontClient):
    """Wavefront client, safe to use from multiple threads"""

    def __init__(self, base_url: Union[str, URL], token: str, client: WavefrontHttpClient = None):
        self.config = ClientConfig(base_url, token)
        self.auth = BearerTokenAuth(self.config.token)
        self._owns_client = client is None
        self.client = client or WavefrontHttpClient()

    @classmethod
    def from_settings(cls, settings, client: WavefrontHttpClient = None) -> "DefaultWavefrontClient":
        """Creates client from `wavefront` section of Dynaconf settings"""
        return cls(settings["wavefront"]["url"], settings["wavefront"]["token"], client=client)

    def close(self):
        """Closes the underlying connection pool, unless it was passed in by the caller"""
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def url(self, endpoint: str) -> URL:
        """Absolute URL of the `endpoint`"""
        base_url = self.config.base_url
        return base_url.copy_with(path=join_path(base_url.path, endpoint))

    def do(self, verb: str, endpoint: str, params: Mapping[str, str] = None) -> Response:
        url = self.url(endpoint)
        params = dict(sorted((params or {}).items()))
        logger.debug("DefaultWavefrontClient.do, %s %s", verb, url.copy_merge_params(params))

        result = self.client.request(verb, url, params=params, auth=self.auth)
        if result.error is not None:
            raise TransportError(str(result.error)) from result.error

        if not result.is_success:
            try:
                result.response.read()
            except RequestError as e:
                logger.debug("Unable to read body of %s response: %s", result.response.status_code, e)
                result.close()
            raise StatusError(result.response)
        return result.response

    @staticmethod
    def _decode(response: Response, model):
        """Decodes JSON body into `model`, the response is always closed"""
        try:
            return model.model_validate_json(response.read())
        except RequestError as e:
            raise TransportError(str(e)) from e
        except (ValidationError, RecursionError) as e:
            raise BadResponseError(str(e)) from e
        finally:
            response.close()

    def list_metrics(self, prefix: str) -> list[str]:
        logger.debug("DefaultWavefrontClient.list_metrics, prefix=%s", prefix)

        params = {METRIC_KEY: prefix, LIMIT_KEY: str(METRICS_LIST_LIMIT)}
        response = self.do("GET", METRICS_LIST_ENDPOINT, params)
        result = self._decode(response, ListResult)

        logger.log(TRACE, "DefaultWavefrontClient.list_metrics %s", result.metrics)
        return result.metrics

    def query(self, start: int, query: str) -> QueryResult:
        logger.debug("DefaultWavefrontClient.query: start=%d, query=%s", start, query)
        if not query:
            raise BadRequestError("empty query string")

        params = {
            QUERY_KEY: query,
            START_TIME: str(int(start)),
            GRANULARITY: "m",
            OUTSIDE_SERIES: "false",
        }
        response = self.do("GET", CHART_ENDPOINT, params)
        result = self._decode(response, QueryResult)

        logger.log(TRACE, "DefaultWavefrontClient.query %s", result)
        return result
