"""
Domain extraction from free-form email / domain / URL input.
"""
import re
from typing import Optional


class DomainValidationError(ValueError):
    """Input could not be turned into a usable domain."""


class MissingInputError(DomainValidationError):
    """No email or domain was supplied."""

    def __init__(self):
        super().__init__("missing input")


class InvalidDomainError(DomainValidationError):
    """The extracted domain does not look like a hostname."""

    def __init__(self, candidate: str = ""):
        super().__init__("invalid domain format")
        self.candidate = candidate


DOMAIN_RE = re.compile(r"^[a-z0-9.-]+\.[a-z]{2,}$", re.IGNORECASE)
SCHEME_RE = re.compile(r"^https?://")
TRAILER_RE = re.compile(r"[/:?#]")


def normalize_domain(raw: Optional[str]) -> str:
    """Extract a bare domain from an email address, domain or URL.

    Args:
        raw: User supplied input, e.g. "someone@example.com"

    Returns:
        Lower-cased domain without scheme, path, port, query or fragment

    Raises:
        MissingInputError: Input is empty
        InvalidDomainError: The extracted value is not a valid domain
    """
    value = (raw or "").strip().lower()
    if not value:
        raise MissingInputError()

    if "@" in value:
        value = value.rsplit("@", 1)[1]

    value = SCHEME_RE.sub("", value, count=1)
    value = TRAILER_RE.split(value, maxsplit=1)[0]

    if not DOMAIN_RE.match(value):
        raise InvalidDomainError(value)
    return value
