"""Audit engine — the orchestrator.

Reads a validated config and executes Fetch → Process, threading one
error policy and one logger through both steps.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import httpx

from user_audit.errors import UserAuditError
from user_audit.fetcher import fetch_users
from user_audit.models import AuditConfig
from user_audit.processor import process_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "user_audit"


class AuditEngine:
    """Fetch the user list and log the email validity of every record."""

    def __init__(
        self,
        config: AuditConfig | None = None,
        *,
        client: httpx.Client | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._config = config or AuditConfig()
        self._client = client
        self._log = log or logger

    @property
    def policy(self) -> str:
        return self._config.settings.policy

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Execute one audit run and return the number of users fetched.

        Under the strict policy any ``UserAuditError`` is logged and
        re-raised; under the lenient policy the run never raises one.
        """
        with self._log_handlers():
            self._log.info("Audit run started (policy=%s)", self.policy)
            try:
                users = self._run_steps()
            except UserAuditError as exc:
                self._log.error("Audit run failed: %s", exc)
                raise
            self._log.info("Audit run finished — %d users fetched", len(users))
            return len(users)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_steps(self) -> list:
        with self._http_client() as client:
            users = fetch_users(
                client,
                self._config.fetch.endpoint,
                policy=self.policy,
                log=self._log,
            )

        if users:
            process_users(users, policy=self.policy, log=self._log)
        else:
            self._log.warning("No users to process")
        return users

    @contextmanager
    def _http_client(self) -> Iterator[httpx.Client]:
        """Yield the injected client, or open (and close) one for this run."""
        if self._client is not None:
            yield self._client
            return
        with httpx.Client(base_url=self._config.fetch.base_url) as client:
            yield client

    def _log_targets(self) -> list[logging.Logger]:
        """The package logger, plus an injected logger living outside it."""
        targets = [logging.getLogger(PACKAGE_LOGGER)]
        name = self._log.name
        if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
            targets.append(self._log)
        return targets

    @contextmanager
    def _log_handlers(self) -> Iterator[None]:
        """Attach console/file handlers to the run's loggers for one run."""
        settings = self._config.settings
        targets = self._log_targets()
        previous_levels = [target.level for target in targets]

        handlers: list[logging.Handler] = []
        try:
            for target in targets:
                target.setLevel(settings.log_level)
            formatter = logging.Formatter(LOG_FORMAT)
            handlers.append(logging.StreamHandler())
            if settings.log_file:
                Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
                handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
            for handler in handlers:
                handler.setFormatter(formatter)
                for target in targets:
                    target.addHandler(handler)
            yield
        finally:
            for handler in handlers:
                for target in targets:
                    target.removeHandler(handler)
                handler.close()
            for target, level in zip(targets, previous_levels):
                target.setLevel(level)
