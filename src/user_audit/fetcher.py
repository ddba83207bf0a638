"""Fetch the user list from the remote REST endpoint.

One GET, no pagination, no retries.  The HTTP client is passed in so the
caller owns its lifecycle (and tests can substitute it).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from user_audit.errors import FetchFailed, MalformedResponse
from user_audit.models import Policy

logger = logging.getLogger(__name__)

USERS_ENDPOINT = "/users"


def _request_users(client: httpx.Client, endpoint: str) -> tuple[int, list[Any]]:
    """Return ``(status_code, users)`` or raise a fetch-step error."""
    try:
        resp = client.get(endpoint)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise FetchFailed(f"Failed to fetch users: {exc}") from exc

    try:
        data = resp.json()
    except ValueError as exc:
        raise MalformedResponse(
            "Malformed users response: expected an array of users "
            "(body is not valid JSON)"
        ) from exc

    if not isinstance(data, list):
        raise MalformedResponse(
            "Malformed users response: expected an array of users "
            f"(got {type(data).__name__})"
        )
    return resp.status_code, data


def fetch_users(
    client: httpx.Client,
    endpoint: str = USERS_ENDPOINT,
    *,
    policy: Policy = "lenient",
    log: logging.Logger | None = None,
) -> list[Any]:
    """Fetch all user records with a single GET on *endpoint*.

    Parameters
    ----------
    client:
        Configured ``httpx.Client`` (usually with ``base_url`` set).
    policy:
        ``"strict"`` lets ``FetchFailed`` / ``MalformedResponse`` propagate;
        ``"lenient"`` logs them at ERROR and returns an empty list.
    log:
        Sink for the run's log lines; defaults to this module's logger.
    """
    log = log or logger
    log.info("Fetching users from %s", endpoint)

    try:
        status, users = _request_users(client, endpoint)
    except (FetchFailed, MalformedResponse) as exc:
        if policy == "strict":
            raise
        log.error("%s", exc)
        return []

    log.info("Fetch status: %d - Successfully fetched %d users", status, len(users))
    return users
