"""FastAPI application — origin policy, database, routers, error handling."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config import API_PREFIX, APP_VERSION
from utils import iso_now

from ..config import ServerSettings
from .cors import CorsPolicy, OriginMiddleware
from .db import build_engine, build_session_factory, init_db, ping
from .errors import UnhandledErrorMiddleware, error_response, register_error_handlers
from .logging_setup import configure_logging
from .routes.placeholders import router as placeholders_router
from .routes.topics import router as topics_router

logger = logging.getLogger(__name__)


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Build the API. Invalid CORS configuration fails here, not per request."""
    settings = settings or ServerSettings.from_env()
    configure_logging(settings.log_level)

    policy = CorsPolicy.from_settings(settings)
    engine = build_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        logger.info("API ready (env=%s, origins=%s)", settings.environment, policy.describe())
        yield
        logger.info("Shutting down, closing database connections")
        engine.dispose()

    app = FastAPI(title="FunLabs Learning API", version=APP_VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.cors_policy = policy
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Added innermost-first: errors render inside CORS, origin guard runs first.
    app.add_middleware(UnhandledErrorMiddleware, production=settings.is_production)
    app.add_middleware(CORSMiddleware, **policy.middleware_options())
    app.add_middleware(
        OriginMiddleware,
        policy=policy,
        on_reject=partial(error_response, production=settings.is_production),
    )
    register_error_handlers(app)

    app.include_router(topics_router, prefix=API_PREFIX)
    app.include_router(placeholders_router, prefix=API_PREFIX)

    @app.get("/health")
    def health(request: Request):
        session = request.app.state.session_factory()
        try:
            ping(session)
        except SQLAlchemyError as exc:
            logger.error("Health check failed: %s", exc)
            return JSONResponse(
                status_code=500,
                content={
                    "status": "unhealthy",
                    "timestamp": iso_now(),
                    "error": "Database connection failed",
                },
            )
        finally:
            session.close()

        return {
            "status": "healthy",
            "timestamp": iso_now(),
            "environment": settings.environment,
            "database": "connected",
            "version": APP_VERSION,
        }

    return app
