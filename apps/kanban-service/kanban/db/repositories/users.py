"""
User repository.

Same shape as the tag repository with the email as natural key. Users with
assigned work items are only deleted when forced; their items then keep
existing without an assignee.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from kanban.db import models, schemas
from kanban.db.enums import Outcome
from kanban.db.errors import storage_guard

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, user: schemas.UserCreate) -> Tuple[Outcome, int]:
        existing = self._get_by_email(user.email)
        if existing is not None:
            logger.info("user_create_conflict: email=%s existing_id=%s", user.email, existing.id)
            return Outcome.CONFLICT, existing.id

        db_user = models.User(name=user.name, email=user.email)
        with storage_guard(self._db, f"create user {user.email!r}"):
            self._db.add(db_user)
            self._db.commit()
            self._db.refresh(db_user)
        logger.info("user_created: id=%s email=%s", db_user.id, db_user.email)
        return Outcome.CREATED, db_user.id

    def read(self) -> List[schemas.User]:
        rows = self._db.query(models.User).order_by(models.User.id).all()
        return [schemas.User.model_validate(u) for u in rows]

    def find(self, user_id: int) -> Optional[schemas.User]:
        db_user = self._db.get(models.User, user_id)
        return schemas.User.model_validate(db_user) if db_user is not None else None

    def update(self, user: schemas.UserUpdate) -> Outcome:
        db_user = self._db.get(models.User, user.id)
        if db_user is None:
            return Outcome.NOT_FOUND

        clash = self._get_by_email(user.email)
        if clash is not None and clash.id != db_user.id:
            logger.info("user_update_conflict: id=%s email=%s held_by=%s", user.id, user.email, clash.id)
            return Outcome.CONFLICT

        with storage_guard(self._db, f"update user {user.id}"):
            db_user.name = user.name
            db_user.email = user.email
            self._db.commit()
        logger.info("user_updated: id=%s", user.id)
        return Outcome.UPDATED

    def delete(self, user_id: int, force: bool = False) -> Outcome:
        db_user = self._db.get(models.User, user_id)
        if db_user is None:
            return Outcome.NOT_FOUND
        if db_user.items and not force:
            logger.info("user_delete_conflict: id=%s assigned_items=%d", user_id, len(db_user.items))
            return Outcome.CONFLICT

        with storage_guard(self._db, f"delete user {user_id}"):
            for item in list(db_user.items):
                item.assigned_to = None
            self._db.delete(db_user)
            self._db.commit()
        logger.info("user_deleted: id=%s force=%s", user_id, force)
        return Outcome.DELETED

    def _get_by_email(self, email: str) -> Optional[models.User]:
        return self._db.query(models.User).filter(models.User.email == email).first()
