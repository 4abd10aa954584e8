"""
Report assembly from probe outcomes.
"""
from typing import List, Sequence, Tuple

from login_finder.models.report import LoginReport, ProbeOutcome, TestedGuess


def to_tested_guess(guess: str, outcome: ProbeOutcome) -> TestedGuess:
    """Convert a candidate and its outcome into the reported entry."""
    return TestedGuess(
        guess=guess,
        ok=outcome.responded,
        status=outcome.status,
        info_url=outcome.final_url,
        error=outcome.error,
    )


def aggregate(domain: str, mx_records: List[str],
              tested: Sequence[Tuple[str, ProbeOutcome]]) -> LoginReport:
    """Build the final report.

    Args:
        domain: Normalized domain
        mx_records: Rendered MX records, already sorted
        tested: (candidate, outcome) pairs in candidate order

    Returns:
        Report whose ``successful`` list holds the 2xx/3xx responses in order
    """
    entries = [to_tested_guess(guess, outcome) for guess, outcome in tested]
    successful = [
        entry for entry, (_, outcome) in zip(entries, tested)
        if outcome.is_login_candidate
    ]
    return LoginReport(
        domain=domain,
        mx_records=mx_records,
        tested=entries,
        successful=successful,
    )
