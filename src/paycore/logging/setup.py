"""
Loguru configuration. Every record carries the exchange_id of the request
being served, or "-" outside of a request.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from loguru import logger

NO_EXCHANGE_ID = "-"
_exchange_id: ContextVar[str] = ContextVar("exchange_id", default=NO_EXCHANGE_ID)

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {extra[exchange_id]} | "
    "{name}:{line} - {message}"
)


def _inject_exchange_id(record):
    record["extra"]["exchange_id"] = _exchange_id.get()


def configure_logging(level: str = "INFO") -> None:
    """Replace every loguru sink with a single stdout sink at the given level."""
    logger.configure(
        handlers=[
            {
                "sink": sys.stdout,
                "level": level.upper(),
                "format": LOG_FORMAT,
                "backtrace": False,
                "diagnose": False,
            }
        ],
        extra={"exchange_id": NO_EXCHANGE_ID},
        patcher=_inject_exchange_id,
    )


@contextmanager
def exchange_id_context(exchange_id: Optional[str]) -> Iterator[str]:
    """Tag log records emitted inside the block with exchange_id."""
    value = exchange_id or NO_EXCHANGE_ID
    token = _exchange_id.set(value)
    try:
        yield value
    finally:
        _exchange_id.reset(token)


def get_exchange_id() -> str:
    return _exchange_id.get()
