"""
Server Configuration
=====================
Host, port and log level for the Task API, read from the environment
(TASKAPI_HOST, TASKAPI_PORT, TASKAPI_LOG_LEVEL) and overridable from
the command line.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "TASKAPI"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"

# Levels uvicorn accepts.
LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_choice(name: str, choices: set[str], default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


@dataclass
class ServerConfig:
    """Settings for one server process."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL  # "debug", "info", "warning", "error"

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build a config from TASKAPI_* variables, falling back to defaults."""
        return cls(
            host=os.environ.get(f"{ENV_PREFIX}_HOST", "").strip() or DEFAULT_HOST,
            port=_env_int(f"{ENV_PREFIX}_PORT", DEFAULT_PORT),
            log_level=_env_choice(f"{ENV_PREFIX}_LOG_LEVEL", LOG_LEVELS,
                                  DEFAULT_LOG_LEVEL),
        )

    def with_overrides(self, host: str = None, port: int = None,
                       log_level: str = None) -> ServerConfig:
        """Return a copy with any non-None value replaced."""
        return ServerConfig(
            host=host if host is not None else self.host,
            port=port if port is not None else self.port,
            log_level=log_level.lower() if log_level is not None else self.log_level,
        )
