"""Server settings sourced from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from config import (
    DEFAULT_BACKEND_HOST,
    DEFAULT_BACKEND_PORT,
    DEFAULT_DATABASE_URL,
    DEFAULT_WORKSPACE_DOMAIN,
    LOCAL_DEV_ORIGINS,
)
from utils import parse_bool, split_csv, split_patterns


@dataclass(frozen=True)
class ServerSettings:
    """Immutable backend configuration, built once at startup."""

    environment: str = "development"
    host: str = DEFAULT_BACKEND_HOST
    port: int = DEFAULT_BACKEND_PORT
    database_url: str = DEFAULT_DATABASE_URL
    allowed_origins: tuple[str, ...] = LOCAL_DEV_ORIGINS
    allowed_origin_patterns: tuple[str, ...] = ()
    workspace_domain: str | None = DEFAULT_WORKSPACE_DOMAIN
    cors_allow_all: bool = False
    cors_allow_credentials: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> ServerSettings:
        origins = split_csv(os.getenv("ALLOWED_ORIGINS"))
        allow_all = parse_bool(os.getenv("CORS_ALLOW_ALL"), False)
        return cls(
            environment=os.getenv("APP_ENV") or os.getenv("NODE_ENV") or cls.environment,
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT") or cls.port),
            database_url=os.getenv("DATABASE_URL") or cls.database_url,
            allowed_origins=tuple(origins) if origins else LOCAL_DEV_ORIGINS,
            allowed_origin_patterns=tuple(split_patterns(os.getenv("ALLOWED_ORIGIN_PATTERNS"))),
            workspace_domain=os.getenv("WORKSPACE_DOMAIN", cls.workspace_domain) or None,
            cors_allow_all=allow_all,
            # Credentials default off in allow-all mode; an explicit "true" is
            # still rejected when the policy is built.
            cors_allow_credentials=parse_bool(
                os.getenv("CORS_ALLOW_CREDENTIALS"), not allow_all
            ),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["ServerSettings"]
