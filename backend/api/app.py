"""
FastAPI application for the Grand Line Guide backend.

Routes:
- /signup, /login, /protected (auth module, unprefixed)
- /api/country-guide (guide module)
- /api/health
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from modules.auth.routes import router as auth_router
from modules.guide.routes import router as guide_router

from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"{settings.app_name} {settings.app_version} listening on {settings.host}:{settings.port}")
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; signup and login will fail")
    if settings.credential_backend == "memory":
        logger.info("Using in-memory credential store; accounts are lost on restart")
    logger.info(f"Country guides from {settings.guide_provider}:{settings.guide_model}")
    yield
    logger.info("Backend stopped")


def create_app() -> FastAPI:
    """Build a fresh application from the current settings."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Accounts and AI country guides for the Grand Line Guide",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    register_exception_handlers(app)

    app.include_router(auth_router, tags=["auth"])
    app.include_router(guide_router, prefix="/api", tags=["guide"])
    app.include_router(health.router, prefix="/api", tags=["health"])

    return app


# Instance served by `uvicorn api:app`
app = create_app()
