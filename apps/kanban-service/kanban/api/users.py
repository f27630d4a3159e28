"""
Users API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from kanban.db import schemas
from kanban.db.database import get_db
from kanban.db.repositories.users import UserRepository
from kanban.api.outcomes import ensure_matching_id, raise_for_outcome

router = APIRouter(prefix="/users", tags=["users"])


def get_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


@router.post("/", response_model=schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(user: schemas.UserCreate, repo: UserRepository = Depends(get_repository)):
    outcome, user_id = repo.create(user)
    raise_for_outcome(outcome, f"Email '{user.email}' is already registered (id {user_id})")
    return schemas.CreatedResponse(id=user_id)


@router.get("/", response_model=List[schemas.User])
def get_all_users_endpoint(repo: UserRepository = Depends(get_repository)):
    return repo.read()


@router.get("/{user_id}", response_model=schemas.User)
def get_user_endpoint(user_id: int, repo: UserRepository = Depends(get_repository)):
    user = repo.find(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user_endpoint(user_id: int, user: schemas.UserUpdate, repo: UserRepository = Depends(get_repository)):
    ensure_matching_id(user_id, user.id)
    raise_for_outcome(repo.update(user), f"Cannot update user {user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_endpoint(user_id: int, force: bool = False, repo: UserRepository = Depends(get_repository)):
    raise_for_outcome(repo.delete(user_id, force=force), f"Cannot delete user {user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
