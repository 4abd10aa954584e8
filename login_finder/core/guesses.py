"""
Candidate login URL generation.
"""
from typing import List

# Order is observable in the report; keep it stable.
GUESS_TEMPLATES = [
    "https://mail.{domain}",
    "https://webmail.{domain}",
    "https://owa.{domain}",
    "https://{domain}/mail",
    "https://{domain}/webmail",
    "https://{domain}/owa",
    "https://{domain}/login",
    "https://login.{domain}",
    "https://{domain}/roundcube/",
]


def generate_guesses(domain: str) -> List[str]:
    """Build the ordered, de-duplicated list of candidate login URLs.

    Args:
        domain: Normalized domain name

    Returns:
        Candidate URLs in template order
    """
    domain = domain.rstrip("/")
    guesses = (template.format(domain=domain) for template in GUESS_TEMPLATES)
    return list(dict.fromkeys(guesses))
