"""
Email Login Finder - FastAPI Backend

Guesses webmail/login URLs for a domain by resolving its MX records and
probing conventional login locations.
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from login_finder.config.settings import settings
from login_finder.api.routes import health_router, login_router
from login_finder.core.finder import LoginFinder
from login_finder.core.mx_resolver import MXResolver, build_resolver
from login_finder.core.probe_engine import ProbeEngine, build_http_client
from login_finder.core.rate_limiter import RateLimiter

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger("login_finder")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build shared services on startup and release them on shutdown."""
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    client = build_http_client(settings.user_agent)
    resolver = build_resolver(settings.dns_nameservers, settings.dns_lifetime)

    app.state.login_finder = LoginFinder(
        mx_resolver=MXResolver(resolver),
        probe_engine=ProbeEngine(
            client,
            batch_size=settings.probe_batch_size,
            timeout_ms=settings.probe_timeout_ms
        )
    )
    app.state.rate_limiter = RateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds
    )
    try:
        yield
    finally:
        logger.info("Shutting down server...")
        await client.aclose()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Webmail/login endpoint discovery from MX records and URL probing",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(login_router)

# Static frontend last so it never shadows the API
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
