"""Things users comment on: experiments and database items."""
from sqlalchemy.orm import declared_attr, relationship
from sqlalchemy.schema import Column, ForeignKey
from sqlalchemy.types import DateTime, Integer, UnicodeText

from labbook.core.singleton import UniqueName
from labbook.core.util import utcnow

from .base import IdMixin, db

__all__ = ["EntityType", "EXPERIMENT", "DATABASE_ITEM", "Experiment", "Item"]


class EntityType(UniqueName):
    """Kind of commentable entity. Instances are unique by name.

    The name is also the comments storage partition prefix:
    ``<name>_comments``.

    :param notifiable: whether owners are emailed when somebody comments.
    :param view_page_path: path of the page showing one entity, relative to
        the site root.
    """

    __slots__ = ("notifiable", "view_page_path")

    def __init__(self, name, notifiable=False, view_page_path=None):
        UniqueName.__init__(self, name)
        self.notifiable = notifiable
        self.view_page_path = view_page_path or self.name


EXPERIMENT = EntityType("experiments", notifiable=True)
DATABASE_ITEM = EntityType("items", view_page_path="database")


class EntityMixin(IdMixin):
    #: kind of entity stored in this table, an :class:`EntityType`
    entity_type = None

    title = Column(UnicodeText, nullable=False, default="Untitled")
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    @declared_attr
    def owner_id(cls):
        return Column("userid", Integer, ForeignKey("users.userid"), nullable=False)

    @declared_attr
    def owner(cls):
        return relationship("User")

    def __repr__(self):
        cls = self.__class__
        return "<{mod}.{cls} id={id!r} owner={owner!r} at 0x{addr:x}>".format(
            mod=cls.__module__,
            cls=cls.__name__,
            id=self.id,
            owner=self.owner_id,
            addr=id(self),
        )


class Experiment(EntityMixin, db.Model):
    __tablename__ = "experiments"
    entity_type = EXPERIMENT


class Item(EntityMixin, db.Model):
    """A record of the team's database (reagents, plasmids, antibodies...)."""

    __tablename__ = "items"
    entity_type = DATABASE_ITEM
