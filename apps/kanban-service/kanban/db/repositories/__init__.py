"""
Per-entity repositories.

Each repository wraps a caller-supplied ``Session`` and commits once per
public operation, returning an ``Outcome`` for expected conditions.
"""

from .tags import TagRepository
from .users import UserRepository
from .work_items import WorkItemRepository

__all__ = ["TagRepository", "UserRepository", "WorkItemRepository"]
