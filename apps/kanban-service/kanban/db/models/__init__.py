"""
SQLAlchemy models for the kanban domain.

Exposes ``Base``, ``now_utc`` and the ORM classes from one import path.
"""

from .base import Base, now_utc  # re-export

from .users import User
from .work_items import WorkItem, work_item_tags
from .tags import Tag

__all__ = [
    "Base",
    "now_utc",
    "User",
    "Tag",
    "WorkItem",
    "work_item_tags",
]
