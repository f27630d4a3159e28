"""
Tag repository.

Keyed CRUD over tags. Names are unique; a tag still linked to work items is
only deleted when the caller forces it.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from kanban.db import models, schemas
from kanban.db.enums import Outcome
from kanban.db.errors import storage_guard

logger = logging.getLogger(__name__)


class TagRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, tag: schemas.TagCreate) -> Tuple[Outcome, int]:
        existing = self._get_by_name(tag.name)
        if existing is not None:
            logger.info("tag_create_conflict: name=%s existing_id=%s", tag.name, existing.id)
            return Outcome.CONFLICT, existing.id

        db_tag = models.Tag(name=tag.name)
        with storage_guard(self._db, f"create tag {tag.name!r}"):
            self._db.add(db_tag)
            self._db.commit()
            self._db.refresh(db_tag)
        logger.info("tag_created: id=%s name=%s", db_tag.id, db_tag.name)
        return Outcome.CREATED, db_tag.id

    def read(self) -> List[schemas.Tag]:
        rows = self._db.query(models.Tag).order_by(models.Tag.id).all()
        return [schemas.Tag.model_validate(t) for t in rows]

    def find(self, tag_id: int) -> Optional[schemas.Tag]:
        db_tag = self._db.get(models.Tag, tag_id)
        return schemas.Tag.model_validate(db_tag) if db_tag is not None else None

    def update(self, tag: schemas.TagUpdate) -> Outcome:
        db_tag = self._db.get(models.Tag, tag.id)
        if db_tag is None:
            return Outcome.NOT_FOUND

        clash = self._get_by_name(tag.name)
        if clash is not None and clash.id != db_tag.id:
            logger.info("tag_update_conflict: id=%s name=%s held_by=%s", tag.id, tag.name, clash.id)
            return Outcome.CONFLICT

        with storage_guard(self._db, f"update tag {tag.id}"):
            db_tag.name = tag.name
            self._db.commit()
        logger.info("tag_updated: id=%s name=%s", tag.id, tag.name)
        return Outcome.UPDATED

    def delete(self, tag_id: int, force: bool = False) -> Outcome:
        db_tag = self._db.get(models.Tag, tag_id)
        if db_tag is None:
            return Outcome.NOT_FOUND
        if db_tag.work_items and not force:
            logger.info("tag_delete_conflict: id=%s linked_items=%d", tag_id, len(db_tag.work_items))
            return Outcome.CONFLICT

        # Link rows go with the tag; the work items themselves stay
        with storage_guard(self._db, f"delete tag {tag_id}"):
            self._db.delete(db_tag)
            self._db.commit()
        logger.info("tag_deleted: id=%s force=%s", tag_id, force)
        return Outcome.DELETED

    def _get_by_name(self, name: str) -> Optional[models.Tag]:
        return self._db.query(models.Tag).filter(models.Tag.name == name).first()
