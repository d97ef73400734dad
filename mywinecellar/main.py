"""FastAPI application entry point for MyWineCellar."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from mywinecellar import __version__
from mywinecellar.config import settings
from mywinecellar.database import close_db, init_db
from mywinecellar.exceptions import CellarError
from mywinecellar.routers import producers, wines
from mywinecellar.routers._common import limiter
from mywinecellar.services.seed import seed_reference_data

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = (
            "default-src 'none'; img-src 'self'; frame-ancestors 'none';"
        )

        if settings.enforce_https:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains; preload"
            )

        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    await init_db()

    if settings.seed_taxonomy_defaults:
        await seed_reference_data(settings.default_taxonomy_id)

    logger.info(
        "%s %s started (default taxonomy id %d)",
        settings.app_name,
        __version__,
        settings.default_taxonomy_id,
    )

    yield

    await close_db()


async def cellar_error_handler(request: Request, exc: CellarError) -> JSONResponse:
    """Render a CellarError as a status code plus a single message."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_code, "detail": exc.message},
    )


app = FastAPI(
    title=settings.app_name,
    description="Wine catalog write service for a personal cellar tracker",
    version=__version__,
    lifespan=lifespan,
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(CellarError, cellar_error_handler)

# Only allow origins from the whitelist; empty list means same-origin only
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["Content-Type"],
        max_age=600,
    )

app.add_middleware(SecurityHeadersMiddleware)


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(
        content={
            "status": "healthy",
            "version": __version__,
            "app_name": settings.app_name,
        }
    )


app.include_router(wines.router, prefix="/api/wine", tags=["Wines"])
app.include_router(producers.router, prefix="/api/producer", tags=["Producers"])
