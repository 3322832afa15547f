"""TubeSearch - Main application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from tubesearch.api import health_router, search_router
from tubesearch.config import get_settings
from tubesearch.db import dispose_engine, init_db
from tubesearch.logging import setup_logging


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Our own pages must not be framed
        response.headers["X-Frame-Options"] = "DENY"

        # Only the YouTube player may be embedded
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data: https:; "
            "frame-src https://www.youtube.com; "
            "frame-ancestors 'none'"
        )

        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup: a storage failure here aborts the process
    setup_logging()
    await init_db()
    yield
    # Shutdown
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Raises:
        pydantic.ValidationError: If the YouTube API key is not configured
    """
    get_settings()

    app = FastAPI(
        title="TubeSearch",
        description="Search YouTube videos and watch them embedded",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(health_router)
    app.include_router(search_router)

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
