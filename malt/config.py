from __future__ import annotations

import logging
import os
import sys

# Defaults
DEFAULT_PROMPT = "user> "
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 8765


def get_prompt() -> str:
    return os.environ.get("MALT_PROMPT", DEFAULT_PROMPT)


def get_log_level(name: str | None = None) -> int:
    """Resolve a level name (argument first, then MALT_LOG_LEVEL) to a logging level."""
    raw = (name or os.environ.get("MALT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, raw, None)
    if isinstance(level, int):
        return level
    return logging.WARNING


def get_server_address() -> tuple[str, int]:
    host = os.environ.get("MALT_SERVER_HOST", DEFAULT_SERVER_HOST)
    raw_port = os.environ.get("MALT_SERVER_PORT")
    try:
        port = int(raw_port) if raw_port else DEFAULT_SERVER_PORT
    except ValueError:
        port = DEFAULT_SERVER_PORT
    return host, port


def configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
