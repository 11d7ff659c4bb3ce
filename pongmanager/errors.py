"""
Error types raised by the scheduling engine and the championship layer.

Every failure is deterministic for a given input; nothing here is retryable.
Callers decide how to surface them (the CLI prints them, tests assert them).
"""

from __future__ import annotations


class PongManagerError(Exception):
    """Base class for all pongmanager errors."""


class InvalidConfiguration(PongManagerError, ValueError):
    """Raised for unusable tournament parameters or a malformed config file."""


class InvalidParticipants(PongManagerError):
    """Raised when a fixture or team references the wrong participants."""


class InvalidResult(PongManagerError):
    """Raised when a score cannot be recorded against a fixture."""


class NotFound(PongManagerError, LookupError):
    """Raised when a group, fixture or participant id has no matching record."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key!r}")


class ChampionshipStateError(PongManagerError):
    """Raised when a championship is in the wrong state for an operation."""
