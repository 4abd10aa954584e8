"""
Login discovery pipeline for a single request.
"""
import asyncio
import logging
from typing import Optional

from login_finder.core.aggregator import aggregate
from login_finder.core.guesses import generate_guesses
from login_finder.core.mx_resolver import MXResolver
from login_finder.core.normalizer import normalize_domain
from login_finder.core.probe_engine import ProbeEngine
from login_finder.models.report import LoginReport

logger = logging.getLogger("login_finder.finder")


class LoginFinder:
    """Ties normalization, MX lookup, probing and aggregation together."""

    def __init__(self, mx_resolver: MXResolver, probe_engine: ProbeEngine):
        """Initialize login finder.

        Args:
            mx_resolver: MX lookup service
            probe_engine: Candidate URL prober
        """
        self.mx_resolver = mx_resolver
        self.probe_engine = probe_engine

    async def find(self, raw_input: Optional[str]) -> LoginReport:
        """Discover login endpoints for an email address or domain.

        Args:
            raw_input: Email address, domain or URL

        Returns:
            Complete report

        Raises:
            DomainValidationError: Input is missing or not a domain
        """
        domain = normalize_domain(raw_input)
        guesses = generate_guesses(domain)
        logger.info("Looking up login pages for %s (%d candidates)", domain, len(guesses))

        mx_records, outcomes = await asyncio.gather(
            self.mx_resolver.resolve(domain),
            self.probe_engine.probe_all(guesses),
        )

        report = aggregate(
            domain,
            MXResolver.render(mx_records),
            list(zip(guesses, outcomes)),
        )
        logger.info(
            "Finished %s: %d MX, %d tested, %d successful",
            domain, len(report.mx_records), len(report.tested), len(report.successful),
        )
        return report
