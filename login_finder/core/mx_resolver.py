"""
MX record lookup for a domain.
"""
import logging
from typing import List, Optional

import dns.asyncresolver
import dns.exception

from login_finder.models.report import MXRecord

logger = logging.getLogger("login_finder.dns")


def build_resolver(nameservers: Optional[List[str]] = None,
                   lifetime: float = 5.0) -> dns.asyncresolver.Resolver:
    """Create an async resolver.

    Args:
        nameservers: Explicit nameserver IPs; system configuration when empty
        lifetime: Total time budget for a single query in seconds

    Returns:
        Configured resolver
    """
    if nameservers:
        resolver = dns.asyncresolver.Resolver(configure=False)
        resolver.nameservers = list(nameservers)
    else:
        resolver = dns.asyncresolver.Resolver()
    resolver.lifetime = lifetime
    return resolver


class MXResolver:
    """Resolves MX records, treating any DNS failure as "no records"."""

    def __init__(self, resolver: dns.asyncresolver.Resolver):
        """Initialize MX resolver.

        Args:
            resolver: Shared dnspython async resolver
        """
        self.resolver = resolver

    async def resolve(self, domain: str) -> List[MXRecord]:
        """Look up MX records sorted by ascending priority.

        Records with equal priority keep the order the resolver returned.

        Args:
            domain: Domain name to query

        Returns:
            Sorted MX records, or an empty list if the lookup failed
        """
        try:
            answers = await self.resolver.resolve(domain, "MX")
        except (dns.exception.DNSException, OSError) as e:
            logger.debug("MX lookup failed for %s: %s", domain, e)
            return []

        records = [
            MXRecord(
                exchange=rdata.exchange.to_text(omit_final_dot=True),
                priority=rdata.preference,
            )
            for rdata in answers
        ]
        return sorted(records, key=lambda record: record.priority)

    @staticmethod
    def render(records: List[MXRecord]) -> List[str]:
        """Render records as report display strings."""
        return [record.render() for record in records]
