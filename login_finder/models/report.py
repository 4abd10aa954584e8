"""
Data models for the Email Login Finder.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator


class MXRecord(BaseModel):
    """Mail exchange record for a domain."""
    exchange: str
    priority: int

    def render(self) -> str:
        """Display string used in the report."""
        return f"{self.exchange} (prio {self.priority})"


class ProbeOutcome(BaseModel):
    """Result of probing one candidate URL.

    Either a response was obtained (``status`` and ``final_url`` set) or the
    probe failed (``error`` set). Never both.
    """
    status: Optional[int] = None
    final_url: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_exclusive(self):
        if (self.error is None) == (self.status is None):
            raise ValueError("outcome must carry either a status or an error")
        return self

    @classmethod
    def success(cls, status: int, final_url: str) -> "ProbeOutcome":
        return cls(status=status, final_url=final_url)

    @classmethod
    def failure(cls, reason: str) -> "ProbeOutcome":
        return cls(error=reason)

    @property
    def responded(self) -> bool:
        """True when an HTTP response was obtained, whatever its status."""
        return self.error is None

    @property
    def is_login_candidate(self) -> bool:
        """True for responses with a 2xx or 3xx status."""
        return self.responded and 200 <= self.status < 400


class TestedGuess(BaseModel):
    """One probed candidate as reported to the caller."""
    guess: str
    ok: bool
    status: Optional[int] = None
    info_url: Optional[str] = Field(default=None, alias="infoUrl")
    error: Optional[str] = None

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class LoginReport(BaseModel):
    """Complete result for a single login lookup."""
    domain: str
    mx_records: List[str] = Field(default_factory=list, alias="mxRecords")
    tested: List[TestedGuess] = []
    successful: List[TestedGuess] = []

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
