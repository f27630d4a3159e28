"""
Pydantic schemas for repository payloads and projections.
"""

from pydantic import BaseModel

from .users import UserBase, UserCreate, UserUpdate, User
from .tags import TagBase, TagCreate, TagUpdate, Tag
from .work_items import (
    WorkItemBase,
    WorkItemCreate,
    WorkItemUpdate,
    WorkItem,
    WorkItemDetails,
)


class CreatedResponse(BaseModel):
    id: int


__all__ = [
    # Users
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
    # Tags
    "TagBase",
    "TagCreate",
    "TagUpdate",
    "Tag",
    # Work items
    "WorkItemBase",
    "WorkItemCreate",
    "WorkItemUpdate",
    "WorkItem",
    "WorkItemDetails",
    # API
    "CreatedResponse",
]
