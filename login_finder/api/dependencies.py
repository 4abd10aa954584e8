"""
Dependency injection for API endpoints.
Services are built once in the application lifespan and stored on app.state.
"""
import logging
from fastapi import Depends, HTTPException, Request

from login_finder.core.finder import LoginFinder
from login_finder.core.rate_limiter import RateLimiter

logger = logging.getLogger("login_finder.api")

RATE_LIMIT_MESSAGE = "Too many requests, please slow down."


def get_login_finder(request: Request) -> LoginFinder:
    """
    Get the login finder built at startup.

    Returns:
        Shared LoginFinder instance
    """
    return request.app.state.login_finder


def get_rate_limiter(request: Request) -> RateLimiter:
    """
    Get the request rate limiter built at startup.

    Returns:
        Shared RateLimiter instance
    """
    return request.app.state.rate_limiter


def enforce_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_rate_limiter)
) -> None:
    """Reject the request with 429 once the client exceeds its quota."""
    client = request.client.host if request.client else "unknown"
    if not limiter.hit(client):
        logger.warning("Rate limit exceeded for %s", client)
        raise HTTPException(status_code=429, detail=RATE_LIMIT_MESSAGE)
