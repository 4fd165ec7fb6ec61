"""Comments, stored in one table per kind of commented entity."""
from typing import Dict, Type

from sqlalchemy import CheckConstraint
from sqlalchemy.orm import declared_attr
from sqlalchemy.schema import Column, ForeignKey
from sqlalchemy.types import DateTime, Integer, UnicodeText

from labbook.core.util import utcnow

from .base import IdMixin, db
from .entities import EntityType, Experiment, Item

__all__ = ["CommentMixin", "ExperimentComment", "ItemComment", "comment_model_for"]

#: minimum length of a stored comment body
MIN_LENGTH = 2

_registry: Dict[EntityType, Type["CommentMixin"]] = {}


def register(cls):
    """Register a comment model as the storage partition for the entity type
    of its `__entity__` class."""
    _registry[cls.__entity__.entity_type] = cls
    return cls


def comment_model_for(entity_type: EntityType) -> Type["CommentMixin"]:
    """Return the comment model storing comments for `entity_type`.

    :raise KeyError: if no comment partition exists for this type.
    """
    if not isinstance(entity_type, EntityType):
        entity_type = EntityType.get(entity_type)
    return _registry[entity_type]


class CommentMixin(IdMixin):
    """Columns shared by all comment partitions.

    Attribute names are pythonic, column names follow the historical schema
    (``<type>_comments(id, item_id, userid, comment, datetime)``).
    """

    #: commented entity class
    __entity__ = None

    @declared_attr
    def item_id(cls):
        target = f"{cls.__entity__.__tablename__}.id"
        return Column(
            Integer,
            ForeignKey(target, ondelete="CASCADE"),
            nullable=False,
            index=True,
        )

    @declared_attr
    def author_id(cls):
        return Column(
            "userid", Integer, ForeignKey("users.userid"), nullable=False
        )

    #: comment's main content, sanitized
    body = Column("comment", UnicodeText(), nullable=False)

    created_at = Column(
        "datetime", DateTime(timezone=True), default=utcnow, nullable=False
    )

    @declared_attr
    def __table_args__(cls):
        return (
            CheckConstraint(
                f"length(comment) >= {MIN_LENGTH}",
                name=f"ck_{cls.__tablename__}_comment_length",
            ),
        )

    def __repr__(self):
        class_ = self.__class__
        mod_ = class_.__module__
        classname = class_.__name__
        return "<{}.{} instance at 0x{:x} item id={!r} date={}".format(
            mod_, classname, id(self), self.item_id, self.created_at
        )


@register
class ExperimentComment(CommentMixin, db.Model):
    __tablename__ = "experiments_comments"
    __entity__ = Experiment


@register
class ItemComment(CommentMixin, db.Model):
    __tablename__ = "items_comments"
    __entity__ = Item
