# SPDX-License-Identifier: MIT
"""Helpers for enabling Pydantic Logfire logging."""

from __future__ import annotations

import os
from typing import Literal

import logfire

LogLevel = Literal["fatal", "error", "warn", "notice", "info", "debug", "trace"]

LOG_LEVELS: list[LogLevel] = [
    "fatal",
    "error",
    "warn",
    "notice",
    "info",
    "debug",
    "trace",
]


def _mask_token(value: str | None) -> str | None:
    """Return a masked representation of ``value`` for safe logging."""

    if not value:
        return None
    return f"{value[:4]}..."


def init_logfire(token: str | None = None, min_log_level: LogLevel = "warn") -> None:
    """Configure Logfire console output and optional upload.

    Args:
        token: Optional Logfire API token. If omitted, ``SCHROTTID_LOGFIRE_TOKEN``
            from the environment is used. Missing tokens keep logs local.
        min_log_level: Minimum level for console and telemetry output.
    """

    key = token or os.getenv("SCHROTTID_LOGFIRE_TOKEN")
    logfire.configure(
        token=key,
        send_to_logfire="if-token-present",
        service_name="schrottid",
        console=logfire.ConsoleOptions(
            min_log_level=min_log_level,
            show_project_link=False,
        ),
        min_level=min_log_level,
    )
    logfire.debug("Configured logfire", token=_mask_token(key))


def level_from_verbosity(base: str, verbose: int = 0, quiet: int = 0) -> LogLevel:
    """Return the level ``verbose`` steps more (or ``quiet`` steps less) chatty."""
    try:
        index = LOG_LEVELS.index(base.lower())  # type: ignore[arg-type]
    except ValueError:
        index = LOG_LEVELS.index("warn")
    index = max(0, min(len(LOG_LEVELS) - 1, index + verbose - quiet))
    return LOG_LEVELS[index]


__all__ = ["LOG_LEVELS", "LogLevel", "init_logfire", "level_from_verbosity"]
