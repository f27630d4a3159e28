"""
Storage failure wrapping for repositories.

Expected business conditions are returned as outcomes; only faults raised by
the storage engine reach callers, as ``RepositoryError``.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class RepositoryError(RuntimeError):
    """Raised when the storage engine fails to persist a change."""


@contextmanager
def storage_guard(db: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise storage failures as ``RepositoryError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("%s failed: %s", action, exc)
        raise RepositoryError(f"Failed to {action}: {exc}") from exc
