"""Per-record email validation and result logging.

Each record produces exactly one log line, in input order:

* INFO  for a valid email (id, name, email, company)
* ERROR for an invalid email (id, email)
* WARNING for a malformed record skipped under the lenient policy
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from user_audit.errors import InvalidInput, MalformedRecord
from user_audit.models import Policy
from user_audit.schemas.user import parse_user
from user_audit.validation import is_valid_email

logger = logging.getLogger(__name__)


def _is_batch(records: Any) -> bool:
    return isinstance(records, Sequence) and not isinstance(records, (str, bytes))


def process_users(
    records: Sequence[Any],
    *,
    policy: Policy = "lenient",
    log: logging.Logger | None = None,
) -> None:
    """Validate the email of every record in *records* and log the outcome."""
    log = log or logger

    is_batch = _is_batch(records)
    if not is_batch or not records:
        if policy == "strict":
            got = type(records).__name__
            raise InvalidInput(
                "Cannot process users: expected a non-empty sequence of records "
                f"(got {'empty ' if is_batch else ''}{got})"
            )
        if not is_batch:
            log.error(
                "Cannot process users: expected a sequence of records, got %s",
                type(records).__name__,
            )
        return

    for index, raw in enumerate(records):
        try:
            user = parse_user(raw, index)
        except MalformedRecord as exc:
            if policy == "strict":
                raise
            log.warning("Skipping %s", exc)
            continue

        if is_valid_email(user.email):
            log.info(
                "ID: %s, Name: %s, Email: %s, Company: %s",
                user.id, user.name, user.email, user.company.name,
            )
        else:
            log.error("Invalid email for user ID %s: %s", user.id, user.email)
