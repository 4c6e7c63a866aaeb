"""Structured log lines for context operations.

Every context event is one INFO record: an event name such as
``context.delete`` followed by ``key=value`` tokens, so a single grep on the
event name finds all of its stages.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping


def format_fields(fields: Mapping[str, object]) -> str:
    texts = {name: str(value).strip() for name, value in fields.items() if value is not None}
    # Blank values are dropped rather than rendered as a bare "name=".
    return " ".join(f"{name}={text}" for name, text in texts.items() if text)


def log_event(logger: logging.Logger, message: str, **fields: object) -> None:
    """Log ``message`` followed by a token for each field that has a value."""

    tokens = format_fields(fields)
    if not tokens:
        logger.info("%s", message)
        return
    logger.info("%s %s", message, tokens)
