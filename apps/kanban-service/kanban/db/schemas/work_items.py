from datetime import datetime
from typing import Annotated, List, Optional
from pydantic import BaseModel, Field

from kanban.db.enums import State

TagName = Annotated[str, Field(min_length=1, max_length=50)]


class WorkItemBase(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    assigned_to_id: Optional[int] = None
    description: Optional[str] = None
    tags: List[TagName] = Field(default_factory=list)


class WorkItemCreate(WorkItemBase):
    pass


class WorkItemUpdate(WorkItemBase):
    id: int
    state: State


class WorkItem(BaseModel):
    """Summary row returned by the list queries."""
    id: int
    title: str
    assigned_to_name: str
    tags: List[str]
    state: State


class WorkItemDetails(BaseModel):
    id: int
    title: str
    description: str
    created: datetime
    assigned_to_name: str
    tags: List[str]
    state: State
    state_updated: datetime
