from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, Table, Enum
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from kanban.db.enums import State


# Link rows for the work item <-> tag membership; one row per (item, tag) pair
work_item_tags = Table(
    'work_item_tags',
    Base.metadata,
    Column('work_item_id', Integer, ForeignKey('work_items.id', ondelete='CASCADE'), primary_key=True),
    Column('tag_id', Integer, ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True),
    Index('idx_work_item_tags_tag_id', 'tag_id'),
)


class WorkItem(Base):
    __tablename__ = 'work_items'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    state = Column(
        Enum(
            State,
            name='work_item_state',
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda states: [s.value for s in states],
        ),
        nullable=False,
        default=State.NEW,
    )
    created = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    state_updated = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    assigned_to_id = Column(Integer, ForeignKey('users.id'), nullable=True)

    assigned_to = relationship("User", back_populates="items")
    tags = relationship("Tag", secondary=work_item_tags, back_populates="work_items")

    __table_args__ = (
        Index('idx_work_items_state', 'state'),
        Index('idx_work_items_assigned_to_id', 'assigned_to_id'),
    )
