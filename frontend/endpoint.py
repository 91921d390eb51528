"""Locate the backend API for the current environment.

Priority order:

1. an explicit base URL (``FUNLABS_API_BASE_URL``), used verbatim;
2. a cloud-workspace hostname ``<name>-<port>.<domain>``, where the backend
   is assumed to be the sibling forwarded port ``<name>-<backend port>``;
3. the local loopback default, ``http://localhost:5000/api``.

The workspace rule splits the hostname at the last hyphen before the domain.
Hostnames under the workspace domain without a ``-<port>`` label do not fit the
convention and fall through to the local default.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

from config import API_PREFIX, DEFAULT_BACKEND_PORT, DEFAULT_WORKSPACE_DOMAIN

logger = logging.getLogger(__name__)


def _backend_port_from_env() -> int:
    raw = os.getenv("BACKEND_PORT")
    if not raw or not raw.strip():
        return DEFAULT_BACKEND_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid BACKEND_PORT %r, using %d", raw, DEFAULT_BACKEND_PORT)
        return DEFAULT_BACKEND_PORT


@dataclass(frozen=True)
class EndpointConfig:
    explicit_base_url: str | None = None
    workspace_domain: str | None = DEFAULT_WORKSPACE_DOMAIN
    backend_port: int = DEFAULT_BACKEND_PORT
    api_prefix: str = API_PREFIX

    @classmethod
    def from_env(cls) -> EndpointConfig:
        return cls(
            explicit_base_url=os.getenv("FUNLABS_API_BASE_URL") or None,
            workspace_domain=os.getenv("WORKSPACE_DOMAIN", cls.workspace_domain) or None,
            backend_port=_backend_port_from_env(),
            api_prefix=os.getenv("API_PREFIX", cls.api_prefix),
        )

    @property
    def local_base_url(self) -> str:
        return f"http://localhost:{self.backend_port}{self.api_prefix}"


def _workspace_host_re(domain: str) -> re.Pattern:
    domain = domain.strip().strip(".")
    return re.compile(rf"^(?P<name>.+)-(?P<port>\d+)\.(?P<domain>{re.escape(domain)})$", re.IGNORECASE)


def workspace_backend_url(hostname: str, config: EndpointConfig) -> str | None:
    """Derive the backend URL from a workspace hostname, or None if it doesn't fit."""
    if not config.workspace_domain:
        return None
    match = _workspace_host_re(config.workspace_domain).match(hostname)
    if match is None:
        return None
    return (
        f"https://{match['name']}-{config.backend_port}.{match['domain']}"
        f"{config.api_prefix}"
    )


def resolve_base_url(hostname: str | None = None, config: EndpointConfig | None = None) -> str:
    """Return the API base URL. Never fails; the local default is the last resort."""
    config = config or EndpointConfig.from_env()

    if config.explicit_base_url:
        logger.debug("Using explicit API base URL: %s", config.explicit_base_url)
        return config.explicit_base_url

    if hostname:
        derived = workspace_backend_url(hostname.strip(), config)
        if derived:
            logger.debug("Workspace host %s -> %s", hostname, derived)
            return derived

    logger.debug("Using local API base URL: %s", config.local_base_url)
    return config.local_base_url


def describe_environment(hostname: str | None, config: EndpointConfig) -> str:
    if config.explicit_base_url:
        return "Explicit configuration"
    if hostname and workspace_backend_url(hostname, config):
        return "Cloud workspace"
    return "Local development"
