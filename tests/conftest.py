"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def users() -> list[dict[str, Any]]:
    """Records matching the JSONPlaceholder /users shape (trimmed)."""
    return [
        {
            "id": 1,
            "name": "Ilan",
            "username": "ilan",
            "email": "ilan@gmail.com",
            "phone": "1-770-736-8031",
            "company": {"name": "Acme", "catchPhrase": "Multi-layered"},
        },
        {
            "id": 2,
            "name": "Ervin Howell",
            "email": "invalid-email",
            "company": {"name": "Deckow-Crist"},
        },
        {
            "id": 3,
            "name": "Clementine Bauch",
            "email": "Nathan@yesenia.net",
            "company": {"name": "Romaguera-Jacobson"},
        },
    ]


def make_client(data: Any = None, *, status_code: int = 200, exc: Exception | None = None) -> MagicMock:
    """Build a MagicMock standing in for ``httpx.Client``.

    ``client.get`` returns a response whose ``json()`` yields *data*, or
    raises *exc* when given.
    """
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = data
    mock_response.raise_for_status = MagicMock()

    mock_client = MagicMock()
    if exc is not None:
        mock_client.get.side_effect = exc
    else:
        mock_client.get.return_value = mock_response
    return mock_client


@pytest.fixture()
def client_factory():
    return make_client
