"""
Work item repository.

Resolves assignees and tags across the three tables, keeps both sides of the
user and tag memberships in sync on create/update, and applies the
state-dependent delete rules:

    New                         -> row removed, Deleted
    Active                      -> tombstoned as Removed, Deleted
    Resolved / Closed / Removed -> untouched, Conflict
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Query, Session, selectinload

from kanban.db import models, schemas
from kanban.db.enums import Outcome, State, SETTLED_STATES
from kanban.db.errors import storage_guard

logger = logging.getLogger(__name__)


class WorkItemRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, item: schemas.WorkItemCreate) -> Tuple[Outcome, Optional[int]]:
        assignee = self._get_user(item.assigned_to_id)
        if assignee is None:
            logger.info("work_item_create_rejected: unknown user_id=%s", item.assigned_to_id)
            return Outcome.BAD_REQUEST, None

        with storage_guard(self._db, f"create work item {item.title!r}"):
            tags = self._resolve_tags(item.tags)
            now = models.now_utc()
            entity = models.WorkItem(
                title=item.title,
                description=item.description,
                state=State.NEW,
                created=now,
                state_updated=now,
            )
            self._db.add(entity)
            self._attach(entity, assignee, tags)
            self._db.commit()
            self._db.refresh(entity)

        logger.info("work_item_created: id=%s user_id=%s tags=%s", entity.id, assignee.id, [t.name for t in tags])
        return Outcome.CREATED, entity.id

    def update(self, item: schemas.WorkItemUpdate) -> Outcome:
        entity = self._db.get(models.WorkItem, item.id)
        if entity is None:
            return Outcome.NOT_FOUND

        assignee = self._get_user(item.assigned_to_id)
        if assignee is None:
            logger.info("work_item_update_rejected: id=%s unknown user_id=%s", item.id, item.assigned_to_id)
            return Outcome.BAD_REQUEST

        with storage_guard(self._db, f"update work item {item.id}"):
            tags = self._resolve_tags(item.tags)
            self._detach(entity)
            self._attach(entity, assignee, tags)

            entity.title = item.title
            entity.description = item.description
            entity.state = item.state
            entity.state_updated = models.now_utc()
            self._db.commit()

        logger.info("work_item_updated: id=%s state=%s user_id=%s", item.id, item.state.value, assignee.id)
        return Outcome.UPDATED

    def delete(self, item_id: int) -> Outcome:
        entity = self._db.get(models.WorkItem, item_id)
        if entity is None:
            return Outcome.NOT_FOUND

        if entity.state in SETTLED_STATES:
            logger.info("work_item_delete_conflict: id=%s state=%s", item_id, entity.state.value)
            return Outcome.CONFLICT

        with storage_guard(self._db, f"delete work item {item_id}"):
            if entity.state == State.NEW:
                self._detach(entity)
                self._db.delete(entity)
                action = "removed"
            else:
                entity.state = State.REMOVED
                entity.state_updated = models.now_utc()
                action = "tombstoned"
            self._db.commit()

        logger.info("work_item_deleted: id=%s action=%s", item_id, action)
        return Outcome.DELETED

    def find(self, item_id: int) -> Optional[schemas.WorkItemDetails]:
        entity = self._db.get(models.WorkItem, item_id)
        if entity is None:
            return None
        return schemas.WorkItemDetails(
            id=entity.id,
            title=entity.title,
            description=entity.description or "",
            created=entity.created,
            assigned_to_name=_assignee_name(entity),
            tags=_tag_names(entity),
            state=entity.state,
            state_updated=entity.state_updated,
        )

    def read(self) -> List[schemas.WorkItem]:
        return self._summaries(self._query())

    def read_by_state(self, state: State) -> List[schemas.WorkItem]:
        return self._summaries(self._query().filter(models.WorkItem.state == state))

    def read_by_tag(self, tag: str) -> List[schemas.WorkItem]:
        q = self._query().filter(models.WorkItem.tags.any(models.Tag.name == tag))
        return self._summaries(q)

    def read_by_user(self, user_id: int) -> List[schemas.WorkItem]:
        return self._summaries(self._query().filter(models.WorkItem.assigned_to_id == user_id))

    def read_removed(self) -> List[schemas.WorkItem]:
        return self.read_by_state(State.REMOVED)

    # Relationship helpers

    def _get_user(self, user_id: Optional[int]) -> Optional[models.User]:
        if user_id is None:
            return None
        return self._db.get(models.User, user_id)

    def _resolve_tags(self, names: Iterable[str]) -> List[models.Tag]:
        """Return stored tags for ``names``, creating the missing ones.

        Repeated names collapse to a single tag.
        """
        wanted = list(dict.fromkeys(names))
        if not wanted:
            return []
        found = {
            t.name: t
            for t in self._db.query(models.Tag).filter(models.Tag.name.in_(wanted)).all()
        }
        tags = []
        for name in wanted:
            tag = found.get(name)
            if tag is None:
                tag = models.Tag(name=name)
                self._db.add(tag)
                logger.debug("tag_created_implicitly: name=%s", name)
            tags.append(tag)
        return tags

    @staticmethod
    def _detach(entity: models.WorkItem) -> None:
        """Drop the item from its previous assignee and tags, both sides."""
        if entity.assigned_to is not None:
            entity.assigned_to.items.remove(entity)
        for tag in list(entity.tags):
            tag.work_items.remove(entity)

    @staticmethod
    def _attach(entity: models.WorkItem, assignee: models.User, tags: List[models.Tag]) -> None:
        assignee.items.append(entity)
        for tag in tags:
            tag.work_items.append(entity)

    # Projections

    def _query(self) -> Query:
        return (
            self._db.query(models.WorkItem)
            .options(selectinload(models.WorkItem.assigned_to), selectinload(models.WorkItem.tags))
            .order_by(models.WorkItem.id)
        )

    @staticmethod
    def _summaries(q: Query) -> List[schemas.WorkItem]:
        return [
            schemas.WorkItem(
                id=entity.id,
                title=entity.title,
                assigned_to_name=_assignee_name(entity),
                tags=_tag_names(entity),
                state=entity.state,
            )
            for entity in q.all()
        ]


def _assignee_name(entity: models.WorkItem) -> str:
    return entity.assigned_to.name if entity.assigned_to is not None else ""


def _tag_names(entity: models.WorkItem) -> List[str]:
    return sorted(t.name for t in entity.tags)
