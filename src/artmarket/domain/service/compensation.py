"""Compensation log for multi-step writes without a shared transaction.

Each completed step registers how to undo itself. If the block fails,
the undo actions run newest first and the original exception is
re-raised unchanged.
"""

from __future__ import annotations

from typing import Any, Callable

import structlog

logger = structlog.get_logger(__name__)


class CompensationLog:

    def __init__(self, **context: Any) -> None:
        self._context = context
        self._actions: list[tuple[str, Callable[[], object]]] = []

    def record(self, description: str, undo: Callable[[], object]) -> None:
        self._actions.append((description, undo))

    def rollback(self) -> None:
        for description, undo in reversed(self._actions):
            try:
                undo()
            except Exception:
                # Keep undoing the rest; the caller still sees the first error.
                logger.exception(
                    "Compensation failed", action=description, **self._context
                )
            else:
                logger.info("Compensated", action=description, **self._context)
        self._actions.clear()

    def __enter__(self) -> CompensationLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None and self._actions:
            logger.warning(
                "Rolling back", error=str(exc), steps=len(self._actions), **self._context
            )
            self.rollback()
        return False
