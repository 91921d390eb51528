"""Client package — re-exports the endpoint resolver and API client."""

from .api import ApiClient, ApiError, HttpStatusError, ParseError, TransportError
from .endpoint import EndpointConfig, resolve_base_url

__all__ = [
    "ApiClient",
    "ApiError",
    "EndpointConfig",
    "HttpStatusError",
    "ParseError",
    "TransportError",
    "resolve_base_url",
]
