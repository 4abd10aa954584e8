"""Core business logic for the application."""
from .normalizer import (
    DomainValidationError,
    MissingInputError,
    InvalidDomainError,
    normalize_domain
)
from .guesses import generate_guesses
from .mx_resolver import MXResolver
from .probe_engine import ProbeEngine
from .aggregator import aggregate
from .finder import LoginFinder
from .rate_limiter import RateLimiter

__all__ = [
    "DomainValidationError",
    "MissingInputError",
    "InvalidDomainError",
    "normalize_domain",
    "generate_guesses",
    "MXResolver",
    "ProbeEngine",
    "aggregate",
    "LoginFinder",
    "RateLimiter"
]
