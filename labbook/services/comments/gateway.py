"""Parameterized SQL on the comments tables.

There is one comments table per entity type (``experiments_comments``,
``items_comments``); a :class:`CommentGateway` works on one of them.
Statements are built with SQLAlchemy Core on the mapped tables, ids are
always bound as integers.
"""
import logging
from collections import namedtuple
from datetime import datetime
from typing import Any, List, Optional

import sqlalchemy as sa
import sqlalchemy.exc
from sqlalchemy.orm import Session

from labbook.core.exceptions import StorageError
from labbook.core.extensions import db
from labbook.core.models import EntityType, User, comment_model_for
from labbook.core.util import fqcn

__all__ = ["CommentGateway", "CommentRow", "UserInfo"]

#: a comment as returned by :meth:`CommentGateway.select_all`
CommentRow = namedtuple(
    "CommentRow",
    ("id", "item_id", "author_id", "author_fullname", "body", "created_at"),
)

#: what the notification dispatcher needs to know about a user
UserInfo = namedtuple("UserInfo", ("id", "email", "fullname"))


def _fullname(users: sa.Table) -> Any:
    return sa.func.trim(users.c.firstname + " " + users.c.lastname).label("fullname")


class CommentGateway:
    def __init__(self, entity_type: EntityType, session: Optional[Session] = None):
        model = comment_model_for(entity_type)
        self.entity_type = entity_type
        self.table = model.__table__
        self.entity_table = model.__entity__.__table__
        self.users = User.__table__
        self._session = session
        self.logger = logging.getLogger(fqcn(self.__class__))

    @property
    def session(self) -> Session:
        if self._session is not None:
            return self._session
        return db.session

    def execute(self, statement: Any) -> Any:
        """Execute `statement` in current session.

        :raise StorageError: on any database error.
        """
        try:
            return self.session.execute(statement)
        except sa.exc.SQLAlchemyError as e:
            self.logger.error(
                "Error while executing SQL query on %s", self.table.name, exc_info=True
            )
            raise StorageError(statement=str(statement)) from e

    def insert(
        self, item_id: int, author_id: int, body: str, created_at: datetime
    ) -> int:
        """Insert a comment and return its id."""
        t = self.table
        stmt = sa.insert(t).values(
            {
                t.c.item_id: int(item_id),
                t.c.userid: int(author_id),
                t.c.comment: body,
                t.c.datetime: created_at,
            }
        )
        result = self.execute(stmt)
        return result.inserted_primary_key[0]

    def select_all(self, item_id: int) -> List[CommentRow]:
        """All comments of an entity, oldest first, with author's full name."""
        t, users = self.table, self.users
        stmt = (
            sa.select(
                t.c.id,
                t.c.item_id,
                t.c.userid,
                _fullname(users),
                t.c.comment,
                t.c.datetime,
            )
            .select_from(t.outerjoin(users, t.c.userid == users.c.userid))
            .where(t.c.item_id == int(item_id))
            .order_by(t.c.datetime.asc(), t.c.id.asc())
        )
        return [CommentRow(*row) for row in self.execute(stmt)]

    def select_author(self, comment_id: int) -> Optional[int]:
        """Author id of a comment, `None` if the comment doesn't exist."""
        t = self.table
        stmt = sa.select(t.c.userid).where(t.c.id == int(comment_id))
        return self.execute(stmt).scalar()

    def update(self, comment_id: int, author_id: int, body: str) -> int:
        """Set comment body, only if `author_id` wrote it.

        :returns: number of rows affected (0 or 1).
        """
        t = self.table
        stmt = (
            sa.update(t)
            .where(t.c.id == int(comment_id), t.c.userid == int(author_id))
            .values({t.c.comment: body})
        )
        return self.execute(stmt).rowcount

    def delete(self, comment_id: int, author_id: int) -> int:
        """Delete a comment, only if `author_id` wrote it.

        :returns: number of rows affected (0 or 1).
        """
        t = self.table
        stmt = sa.delete(t).where(
            t.c.id == int(comment_id), t.c.userid == int(author_id)
        )
        return self.execute(stmt).rowcount

    def user_info(self, user_id: int) -> Optional[UserInfo]:
        users = self.users
        stmt = sa.select(users.c.userid, users.c.email, _fullname(users)).where(
            users.c.userid == int(user_id)
        )
        row = self.execute(stmt).first()
        return UserInfo(*row) if row is not None else None

    def owner_info(self, item_id: int) -> Optional[UserInfo]:
        """Owner of the commented entity."""
        users, entities = self.users, self.entity_table
        stmt = (
            sa.select(users.c.userid, users.c.email, _fullname(users))
            .select_from(users.join(entities, entities.c.userid == users.c.userid))
            .where(entities.c.id == int(item_id))
        )
        row = self.execute(stmt).first()
        return UserInfo(*row) if row is not None else None
