"""Logging helpers for the Jira REST client."""
from __future__ import annotations

import logging
from typing import Iterable

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Append the ``extra=`` fields of a record as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {key: value for key, value in vars(record).items() if key not in _RESERVED}
        if not extras:
            return line
        return line + " " + " ".join(f"{key}={value}" for key, value in sorted(extras.items()))


def configure_logging(
    level: int = logging.INFO,
    *,
    modules: Iterable[str] | None = ("jira_rest",),
    quiet: Iterable[str] = ("httpx", "httpcore"),
) -> None:
    """Configure ``key=value`` logging for command line use.

    Loggers in ``quiet`` stay at WARNING unless ``level`` is DEBUG.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logging.basicConfig(level=level, handlers=[handler])
    if modules:
        for module in modules:
            logging.getLogger(module).setLevel(level)
    for module in quiet:
        logging.getLogger(module).setLevel(level if level <= logging.DEBUG else logging.WARNING)


__all__ = ["ContextFormatter", "configure_logging"]
