"""Pydantic models for run configuration.

An optional YAML file is parsed into these models at startup.  Every field
has a default, so a run with no config file at all is valid.  Invalid
configs fail fast with a ``ValidationError`` before any I/O happens.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

# "lenient": log failures and degrade to "no users processed".
# "strict": raise failures to the caller.
Policy = Literal["lenient", "strict"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FetchSettings(BaseModel):
    base_url: str = "https://jsonplaceholder.typicode.com"
    endpoint: str = "/users"


class AuditSettings(BaseModel):
    log_level: LogLevel = "INFO"
    log_file: str | None = "user_audit.log"
    policy: Policy = "lenient"


class AuditConfig(BaseModel):
    """Root model — represents the entire config YAML file."""

    version: str = "1.0"
    fetch: FetchSettings = Field(default_factory=FetchSettings)
    settings: AuditSettings = Field(default_factory=AuditSettings)


def load_config(path: str | Path | None = None) -> AuditConfig:
    """Read and validate *path*; ``None`` or an empty file means defaults."""
    if path is None:
        return AuditConfig()
    raw = yaml.safe_load(Path(path).read_text())
    return AuditConfig.model_validate(raw or {})
