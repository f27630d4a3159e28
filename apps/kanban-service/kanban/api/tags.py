"""
Tags API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from kanban.db import schemas
from kanban.db.database import get_db
from kanban.db.repositories.tags import TagRepository
from kanban.api.outcomes import ensure_matching_id, raise_for_outcome

router = APIRouter(prefix="/tags", tags=["tags"])


def get_repository(db: Session = Depends(get_db)) -> TagRepository:
    return TagRepository(db)


@router.post("/", response_model=schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_tag_endpoint(tag: schemas.TagCreate, repo: TagRepository = Depends(get_repository)):
    outcome, tag_id = repo.create(tag)
    raise_for_outcome(outcome, f"Tag '{tag.name}' already exists (id {tag_id})")
    return schemas.CreatedResponse(id=tag_id)


@router.get("/", response_model=List[schemas.Tag])
def get_all_tags_endpoint(repo: TagRepository = Depends(get_repository)):
    return repo.read()


@router.get("/{tag_id}", response_model=schemas.Tag)
def get_tag_endpoint(tag_id: int, repo: TagRepository = Depends(get_repository)):
    tag = repo.find(tag_id)
    if tag is None:
        raise HTTPException(status_code=404, detail="Tag not found")
    return tag


@router.put("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_tag_endpoint(tag_id: int, tag: schemas.TagUpdate, repo: TagRepository = Depends(get_repository)):
    ensure_matching_id(tag_id, tag.id)
    raise_for_outcome(repo.update(tag), f"Cannot update tag {tag_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag_endpoint(tag_id: int, force: bool = False, repo: TagRepository = Depends(get_repository)):
    raise_for_outcome(repo.delete(tag_id, force=force), f"Cannot delete tag {tag_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
