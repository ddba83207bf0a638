"""Error taxonomy for an audit run.

Every failure the fetch/process steps can signal derives from
``UserAuditError`` so the entry point can handle them in one clause.
"""

from __future__ import annotations


class UserAuditError(Exception):
    """Base class for all audit-run failures."""


class FetchFailed(UserAuditError):
    """The users endpoint could not be reached or answered with an error status."""


class MalformedResponse(UserAuditError):
    """The endpoint answered, but the body is not an array of users."""


class InvalidInput(UserAuditError):
    """The processor was handed an empty or non-sequence batch."""


class MalformedRecord(UserAuditError):
    """A single record lacks ``email``, ``company.name`` or another required field."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"Malformed user record at index {index}: {reason}")
        self.index = index
        self.reason = reason
