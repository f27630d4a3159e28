from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base
from .work_items import work_item_tags


class Tag(Base):
    __tablename__ = 'tags'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False, unique=True, index=True)

    work_items = relationship("WorkItem", secondary=work_item_tags, back_populates="tags")
