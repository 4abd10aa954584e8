"""Data models for the application."""
from .report import (
    MXRecord,
    ProbeOutcome,
    TestedGuess,
    LoginReport
)

__all__ = [
    "MXRecord",
    "ProbeOutcome",
    "TestedGuess",
    "LoginReport"
]
