"""API package for the application."""
from .dependencies import get_login_finder, get_rate_limiter, enforce_rate_limit

__all__ = [
    "get_login_finder",
    "get_rate_limiter",
    "enforce_rate_limit"
]
