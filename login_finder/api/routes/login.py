"""
Login page discovery endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from login_finder.models.report import LoginReport
from login_finder.core.finder import LoginFinder
from login_finder.core.normalizer import DomainValidationError
from login_finder.api.dependencies import get_login_finder, enforce_rate_limit

router = APIRouter(prefix="/api", tags=["login"])


@router.get(
    "/find-login",
    response_model=LoginReport,
    dependencies=[Depends(enforce_rate_limit)]
)
async def find_login(
    email: Optional[str] = None,
    domain: Optional[str] = None,
    finder: LoginFinder = Depends(get_login_finder)
):
    """
    Guess webmail/login URLs for an email address or domain.

    Args:
        email: Email address, e.g. someone@example.com (takes precedence)
        domain: Bare domain or URL, used when email is empty
        finder: Login finder instance

    Returns:
        Report with MX records, every tested guess and the successful ones
    """
    try:
        return await finder.find(email or domain)
    except DomainValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
