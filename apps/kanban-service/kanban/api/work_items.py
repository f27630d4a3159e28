"""
Work items API endpoints.

Listing accepts at most one filter (state, tag or user_id); the delete rules
live in the repository and surface here as 204 or 409.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from kanban.db import schemas
from kanban.db.database import get_db
from kanban.db.enums import State
from kanban.db.repositories.work_items import WorkItemRepository
from kanban.api.outcomes import ensure_matching_id, raise_for_outcome

router = APIRouter(prefix="/work-items", tags=["work-items"])


def get_repository(db: Session = Depends(get_db)) -> WorkItemRepository:
    return WorkItemRepository(db)


@router.post("/", response_model=schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_work_item_endpoint(item: schemas.WorkItemCreate, repo: WorkItemRepository = Depends(get_repository)):
    outcome, item_id = repo.create(item)
    raise_for_outcome(outcome, f"User {item.assigned_to_id} does not exist")
    return schemas.CreatedResponse(id=item_id)


@router.get("/", response_model=List[schemas.WorkItem])
def get_work_items_endpoint(
    state: Optional[State] = None,
    tag: Optional[str] = None,
    user_id: Optional[int] = None,
    repo: WorkItemRepository = Depends(get_repository),
):
    if sum(f is not None for f in (state, tag, user_id)) > 1:
        raise HTTPException(status_code=400, detail="Use at most one of state, tag, user_id")
    if state is not None:
        return repo.read_by_state(state)
    if tag is not None:
        return repo.read_by_tag(tag)
    if user_id is not None:
        return repo.read_by_user(user_id)
    return repo.read()


@router.get("/removed", response_model=List[schemas.WorkItem])
def get_removed_work_items_endpoint(repo: WorkItemRepository = Depends(get_repository)):
    return repo.read_removed()


@router.get("/{item_id}", response_model=schemas.WorkItemDetails)
def get_work_item_endpoint(item_id: int, repo: WorkItemRepository = Depends(get_repository)):
    item = repo.find(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Work item not found")
    return item


@router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_work_item_endpoint(
    item_id: int,
    item: schemas.WorkItemUpdate,
    repo: WorkItemRepository = Depends(get_repository),
):
    ensure_matching_id(item_id, item.id)
    raise_for_outcome(repo.update(item), f"Cannot update work item {item_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_work_item_endpoint(item_id: int, repo: WorkItemRepository = Depends(get_repository)):
    raise_for_outcome(repo.delete(item_id), f"Work item {item_id} cannot be deleted in its current state")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
