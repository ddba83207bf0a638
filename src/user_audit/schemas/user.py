"""Pydantic model for one record of the ``/users`` endpoint.

Only the fields the processor reads are declared; JSONPlaceholder's
``address``, ``phone``, ``website`` etc. are accepted and ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from user_audit.errors import MalformedRecord


class Company(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class UserRecord(BaseModel):
    """A user as returned by the remote API.

    Only ``email`` and ``company.name`` are required; ``id`` and ``name``
    are logged as-is, whatever they hold.

    ``email`` is a plain string on purpose: whether it is a valid address is
    decided by :func:`user_audit.validation.is_valid_email`, not the schema.
    """

    model_config = ConfigDict(extra="ignore")

    id: Any = None
    name: Any = None
    email: str
    company: Company


def _describe(exc: ValidationError) -> str:
    """Flatten a ValidationError into ``company.name field required; ...``."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "record"
        parts.append(f"{loc} {err['msg'].lower()}")
    return "; ".join(parts)


def parse_user(raw: object, index: int) -> UserRecord:
    """Destructure *raw* into a :class:`UserRecord` or raise ``MalformedRecord``."""
    try:
        return UserRecord.model_validate(raw)
    except ValidationError as exc:
        raise MalformedRecord(index, _describe(exc)) from exc
