"""Structured logging routed through the standard `logging` hierarchy."""

from __future__ import annotations

import logging

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger writing to the stdlib logger `name`.

    Levels and handlers are left to the application; nothing is emitted
    unless the `logging` level for `name` allows it.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )
