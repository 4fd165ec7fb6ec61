"""Comment operations for one entity, and the `comments` service."""
import logging
import smtplib
from typing import List, Optional

from flask import current_app
from flask_mail import BadHeaderError
from sqlalchemy.orm import Session

from labbook.core.signals import comment_created, comment_deleted, comment_updated
from labbook.core.util import fqcn, utcnow
from labbook.services.base import Service

from .context import FORBIDDEN, NOT_FOUND, OWNER, EntityContext, \
    NotificationConfig, Ownership
from .gateway import CommentGateway, CommentRow
from .notifications import NotificationDispatcher
from .sanitizer import prepare

__all__ = ["CommentService", "CommentsService"]


class CommentService:
    """Comments of one entity, on behalf of the current user of `entity`.

    Update and destroy only touch comments written by the current user. When
    the user is not the author, or the comment doesn't exist, nothing happens
    and no error is raised; use :meth:`ownership` to tell these cases apart.
    """

    def __init__(
        self,
        entity: EntityContext,
        gateway: CommentGateway,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.entity = entity
        self.gateway = gateway
        self.dispatcher = dispatcher
        self.logger = logging.getLogger(fqcn(self.__class__))

    @property
    def user_id(self) -> int:
        return self.entity.current_user_id

    def create(self, body: str) -> int:
        """Create a comment and return its id.

        The owner of the entity is notified before the comment is inserted. A
        mail delivery failure, or a message rejected for bad headers, is logged
        and doesn't prevent the insertion.

        :raise ValidationError: if `body` is too short once sanitized.
        :raise StorageError: if the comment can't be inserted.
        """
        body = prepare(body)

        try:
            self.dispatcher.alert_owner(self.entity, self.user_id)
        except (smtplib.SMTPException, OSError, BadHeaderError):
            self.logger.exception(
                "Could not send comment notification for %s %d",
                self.entity.type,
                self.entity.id,
            )

        comment_id = self.gateway.insert(self.entity.id, self.user_id, body, utcnow())
        comment_created.send(self, entity=self.entity, comment_id=comment_id)
        return comment_id

    def read_all(self) -> List[CommentRow]:
        """All comments on the entity, oldest first."""
        return self.gateway.select_all(self.entity.id)

    def update(self, body: str, comment_id: int) -> str:
        """Replace the body of a comment written by the current user.

        :returns: the sanitized body.
        :raise ValidationError: if `body` is too short once sanitized.
        """
        body = prepare(body)
        rowcount = self.gateway.update(comment_id, self.user_id, body)
        if not rowcount:
            self._log_untouched("update", comment_id)
        comment_updated.send(
            self, entity=self.entity, comment_id=comment_id, rowcount=rowcount
        )
        return body

    def destroy(self, comment_id: int) -> None:
        """Delete a comment written by the current user."""
        rowcount = self.gateway.delete(comment_id, self.user_id)
        if not rowcount:
            self._log_untouched("delete", comment_id)
        comment_deleted.send(
            self, entity=self.entity, comment_id=comment_id, rowcount=rowcount
        )

    def ownership(self, comment_id: int) -> Ownership:
        """Tell whether the current user may modify comment `comment_id`."""
        author_id = self.gateway.select_author(comment_id)
        if author_id is None:
            return NOT_FOUND
        if author_id != self.user_id:
            return FORBIDDEN
        return OWNER

    def _log_untouched(self, action: str, comment_id: int) -> None:
        self.logger.info(
            "User %d: %s of comment %d on %s %d affected no row (%s)",
            self.user_id,
            action,
            comment_id,
            self.entity.type,
            self.entity.id,
            self.ownership(comment_id),
        )


class CommentsService(Service):
    """Give access to the comments of an entity.

    .. code-block:: python

        service = get_service("comments").for_entity(
            EntityContext(EXPERIMENT, experiment.id, current_user.id)
        )
        service.create("Nice results!")
    """

    name = "comments"

    def for_entity(
        self, entity: EntityContext, session: Optional[Session] = None
    ) -> CommentService:
        from labbook.services import get_service  # avoid circular import

        gateway = CommentGateway(entity.type, session=session)
        config = NotificationConfig.from_config(current_app.config)
        dispatcher = NotificationDispatcher(config, gateway, get_service("mailer"))
        return CommentService(entity, gateway, dispatcher)
