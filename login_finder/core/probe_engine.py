"""
Batched HTTP probing of candidate login URLs.

Candidates are probed in consecutive batches. All probes of a batch run
concurrently and the next batch only starts once every probe of the current
one has produced an outcome, which caps simultaneous outbound connections at
the batch size. Each probe has its own deadline; a slow or failing probe never
affects its siblings.
"""
import asyncio
import logging
from typing import Iterator, List, Optional, Sequence

import httpx

from login_finder.models.report import ProbeOutcome

logger = logging.getLogger("login_finder.probe")

DEFAULT_BATCH_SIZE = 6
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_USER_AGENT = "EmailLoginFinder/1.0"

TIMEOUT_REASON = "timeout"
FALLBACK_REASON = "fetch-error"


def build_http_client(user_agent: str = DEFAULT_USER_AGENT) -> httpx.AsyncClient:
    """Create the shared client used for probing."""
    return httpx.AsyncClient(
        follow_redirects=True,
        headers={"User-Agent": user_agent},
    )


def batched(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Yield consecutive slices of ``items`` with at most ``size`` members."""
    for start in range(0, len(items), size):
        yield items[start:start + size]


class ProbeEngine:
    """Probes candidate URLs with bounded concurrency."""

    def __init__(self, client: httpx.AsyncClient,
                 batch_size: int = DEFAULT_BATCH_SIZE,
                 timeout_ms: int = DEFAULT_TIMEOUT_MS):
        """Initialize probe engine.

        Args:
            client: Shared HTTP client (follows redirects, sends the user agent)
            batch_size: Default number of concurrent probes per batch
            timeout_ms: Default per-probe deadline in milliseconds
        """
        self.client = client
        self.batch_size = batch_size
        self.timeout_ms = timeout_ms

    async def probe(self, url: str, timeout_ms: int) -> ProbeOutcome:
        """Probe a single URL. Never raises for transport problems."""
        deadline = timeout_ms / 1000
        try:
            return await asyncio.wait_for(self._fetch(url, deadline), timeout=deadline)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.debug("Probe of %s timed out after %dms", url, timeout_ms)
            return ProbeOutcome.failure(TIMEOUT_REASON)
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            logger.debug("Probe of %s failed: %s", url, e)
            return ProbeOutcome.failure(str(e) or FALLBACK_REASON)

    async def _fetch(self, url: str, deadline: float) -> ProbeOutcome:
        # Streaming keeps the body unread; only the final response is inspected.
        async with self.client.stream("GET", url, timeout=deadline) as response:
            return ProbeOutcome.success(response.status_code, str(response.url))

    async def probe_all(self, candidates: Sequence[str],
                        batch_size: Optional[int] = None,
                        timeout_ms: Optional[int] = None) -> List[ProbeOutcome]:
        """Probe all candidates batch by batch.

        Args:
            candidates: Candidate URLs in report order
            batch_size: Probes per batch, engine default when omitted
            timeout_ms: Per-probe deadline, engine default when omitted

        Returns:
            One outcome per candidate, in candidate order
        """
        batch_size = self.batch_size if batch_size is None else batch_size
        timeout_ms = self.timeout_ms if timeout_ms is None else timeout_ms
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

        outcomes: List[ProbeOutcome] = []
        for number, batch in enumerate(batched(list(candidates), batch_size), 1):
            logger.debug("Probing batch %d (%d urls)", number, len(batch))
            results = await asyncio.gather(*(self.probe(url, timeout_ms) for url in batch))
            outcomes.extend(results)
        return outcomes
