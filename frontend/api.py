"""HTTP client for the learning API.

The base URL is resolved once per client and every call is a single GET that
must return a JSON array. No retries and no caching: failures propagate to the
caller as one of three distinct errors.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from .endpoint import EndpointConfig, resolve_base_url

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for client-side API failures."""


class TransportError(ApiError):
    """The backend could not be reached (network, DNS, TLS)."""


class HttpStatusError(ApiError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, url: str):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"HTTP error! status: {status_code} - {reason}")


class ParseError(ApiError):
    """The backend answered, but not with a JSON array."""


def describe_error(error) -> str:
    """Return a message suitable for showing to the user."""
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return "An unknown error occurred"


class ApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        origin: str | None = None,
        session=None,
        hostname: str | None = None,
        config: EndpointConfig | None = None,
    ):
        self.base_url = base_url or resolve_base_url(hostname, config)
        self.origin = origin
        self.session = session or requests.Session()
        self.topics = TopicsApi(self)
        self.lessons = LessonsApi(self)
        logger.debug("API client initialised with base URL %s", self.base_url)

    def api_url(self, endpoint: str) -> str:
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url.rstrip('/')}{endpoint}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.origin:
            headers["Origin"] = self.origin
        return headers

    def get_list(self, endpoint: str) -> list:
        """GET endpoint and return the decoded JSON array."""
        url = self.api_url(endpoint)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, headers=self._headers())
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise TransportError(f"Could not reach {url}: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise HttpStatusError(response.status_code, response.reason, url)

        try:
            data = response.json()
        except ValueError as exc:
            raise ParseError(f"Response from {url} is not valid JSON") from exc
        if not isinstance(data, list):
            raise ParseError(f"Expected a JSON array from {url}, got {type(data).__name__}")
        return data


class TopicsApi:
    def __init__(self, client: ApiClient):
        self._client = client

    def get_all(self) -> list[dict]:
        """All topics, each with its nested lessons."""
        topics = self._client.get_list("/topics")
        logger.info("Retrieved %d topics", len(topics))
        return topics


class LessonsApi:
    def __init__(self, client: ApiClient):
        self._client = client

    def get_questions(self, lesson_id: str) -> list[dict]:
        return self._client.get_list(f"/lessons/{quote(str(lesson_id), safe='')}/questions")
