"""Origin allow-list: decides which browser origins may call the API.

The policy is built once from ``ServerSettings`` and never mutated. Two modes
exist and are never mixed:

- allow-list mode: exact origins plus regex patterns, credentials allowed;
- allow-all mode: any origin, credentials disabled.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from config import CORS_HEADERS, CORS_METHODS

logger = logging.getLogger(__name__)


class CorsConfigError(ValueError):
    """Raised at startup when the CORS configuration is unusable."""


class OriginRejected(Exception):
    """Raised when a request's Origin matches no allow rule."""

    status_code = 403

    def __init__(self, origin: str):
        self.origin = origin
        super().__init__(f"Not allowed by CORS: {origin}")


@dataclass(frozen=True)
class OriginRule:
    """A single allow rule: an exact origin string or a regex pattern."""

    value: str
    is_pattern: bool = False
    _regex: re.Pattern | None = field(default=None, repr=False, compare=False)

    @classmethod
    def exact(cls, origin: str) -> OriginRule:
        origin = origin.strip().rstrip("/")
        if not origin:
            raise CorsConfigError("Empty origin in allow-list")
        return cls(value=origin)

    @classmethod
    def pattern(cls, expression: str) -> OriginRule:
        try:
            compiled = re.compile(expression)
        except re.error as exc:
            raise CorsConfigError(f"Invalid origin pattern {expression!r}: {exc}") from exc
        return cls(value=expression, is_pattern=True, _regex=compiled)

    @classmethod
    def workspace(cls, domain: str) -> OriginRule:
        """Match any forwarded-port host of a cloud workspace domain."""
        domain = domain.strip().strip(".")
        return cls.pattern(rf"https://[A-Za-z0-9-]+\.{re.escape(domain)}")

    def matches(self, origin: str) -> bool:
        if self.is_pattern:
            return self._regex.fullmatch(origin) is not None
        return origin == self.value


@dataclass(frozen=True)
class CorsPolicy:
    rules: tuple[OriginRule, ...] = ()
    allow_all: bool = False
    allow_credentials: bool = True
    methods: tuple[str, ...] = CORS_METHODS
    headers: tuple[str, ...] = CORS_HEADERS

    def __post_init__(self):
        if self.allow_all and self.allow_credentials:
            raise CorsConfigError(
                "Allowing all origins together with credentials is unsafe; "
                "disable credentials or configure an explicit allow-list"
            )

    @classmethod
    def from_settings(cls, settings) -> CorsPolicy:
        """Build the policy from ServerSettings (exact origins first, then patterns)."""
        if settings.cors_allow_all:
            return cls(allow_all=True, allow_credentials=settings.cors_allow_credentials)

        rules = [OriginRule.exact(o) for o in settings.allowed_origins]
        rules += [OriginRule.pattern(p) for p in settings.allowed_origin_patterns]
        if settings.workspace_domain:
            rules.append(OriginRule.workspace(settings.workspace_domain))
        return cls(rules=tuple(rules), allow_credentials=settings.cors_allow_credentials)

    def match(self, origin: str) -> OriginRule | None:
        """Return the first rule accepting origin, or None."""
        for rule in self.rules:
            if rule.matches(origin):
                return rule
        return None

    def check(self, origin: str | None) -> None:
        """Raise OriginRejected unless origin may call the API.

        An absent or empty origin (same-origin, curl, server-to-server) is
        always allowed.
        """
        if not origin or self.allow_all:
            return

        rule = self.match(origin)
        if rule is None:
            raise OriginRejected(origin)
        logger.debug("CORS: origin %s allowed by %s rule %s",
                     origin, "pattern" if rule.is_pattern else "exact", rule.value)

    def middleware_options(self) -> dict:
        """Keyword arguments for starlette's CORSMiddleware, from the same rules."""
        if self.allow_all:
            origins, regex = ["*"], None
        else:
            origins = [r.value for r in self.rules if not r.is_pattern]
            patterns = [f"(?:{r.value})" for r in self.rules if r.is_pattern]
            regex = "|".join(patterns) or None
        return {
            "allow_origins": origins,
            "allow_origin_regex": regex,
            "allow_credentials": self.allow_credentials,
            "allow_methods": list(self.methods),
            "allow_headers": list(self.headers),
        }

    def describe(self) -> list[str]:
        if self.allow_all:
            return ["*"]
        return [f"/{r.value}/" if r.is_pattern else r.value for r in self.rules]


class OriginMiddleware(BaseHTTPMiddleware):
    """Refuses requests whose Origin no rule accepts.

    Sits outside CORSMiddleware, which emits the CORS headers and answers
    preflights. Rejections go through the shared error payload so the
    response names the origin.
    """

    def __init__(self, app, policy: CorsPolicy, on_reject):
        super().__init__(app)
        self.policy = policy
        self.on_reject = on_reject

    async def dispatch(self, request: Request, call_next):
        try:
            self.policy.check(request.headers.get("origin"))
        except OriginRejected as exc:
            logger.warning("CORS: origin rejected: %s (%s %s)",
                           exc.origin, request.method, request.url.path)
            return self.on_reject(request, exc)
        return await call_next(request)


__all__ = [
    "CorsConfigError",
    "CorsPolicy",
    "OriginMiddleware",
    "OriginRejected",
    "OriginRule",
]
