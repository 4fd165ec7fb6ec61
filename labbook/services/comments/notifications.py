"""Email the owner of an entity when somebody comments on it."""
import logging
from typing import Optional
from urllib.parse import urlencode, urljoin

from flask import has_request_context, request
from flask_mail import Message

from labbook.core.util import fqcn
from labbook.i18n import _

from .context import EntityContext, NotificationConfig
from .gateway import CommentGateway, UserInfo

__all__ = ["NotificationDispatcher"]


class NotificationDispatcher:
    """Decide whether to email an entity owner about a new comment, and send
    the message.

    :param config: a :class:`NotificationConfig`.
    :param gateway: used to look up commenter and owner.
    :param mailer: object with a `send(message) -> int` method, usually the
        `mail` service.
    """

    footer = "\n\n~~~\nSent from {site_name}\n"

    def __init__(
        self, config: NotificationConfig, gateway: CommentGateway, mailer
    ) -> None:
        self.config = config
        self.gateway = gateway
        self.mailer = mailer
        self.logger = logging.getLogger(fqcn(self.__class__))

    def alert_owner(self, entity: EntityContext, commenter_id: int) -> int:
        """Notify owner of `entity` that `commenter_id` posted a comment.

        :returns: number of emails sent. 1 is also returned, without sending
            anything, when the commenter owns the entity.
        """
        if not entity.notifiable or not self.config.enabled:
            return 0

        commenter = self.gateway.user_info(commenter_id)
        owner = self.gateway.owner_info(entity.id)
        if owner is None:
            self.logger.warning(
                "No owner found for %s %d, not notifying", entity.type, entity.id
            )
            return 0

        # don't send an email if we are commenting on our own entity
        if owner.id == int(commenter_id):
            return 1

        message = self.compose(entity, commenter, owner)
        sent = self.mailer.send(message)
        self.logger.info(
            "Sent comment notification for %s %d to user %d",
            entity.type,
            entity.id,
            owner.id,
        )
        return sent

    def entity_url(self, entity: EntityContext) -> str:
        """Absolute URL of the page showing `entity`.

        The base URL is taken from the current request, or from `site_url` when
        no request is being served.
        """
        if has_request_context():
            base = request.url_root
        else:
            base = self.config.site_url
        base = base.rstrip("/") + "/"
        query = urlencode({"mode": "view", "id": entity.id})
        return urljoin(base, f"{entity.view_page_path.lstrip('/')}?{query}")

    def compose(
        self, entity: EntityContext, commenter: Optional[UserInfo], owner: UserInfo
    ) -> Message:
        config = self.config
        commenter_name = commenter.fullname if commenter else _("Unknown user")

        subject = _("[%(site_name)s] New comment posted", site_name=config.site_name)
        body = _(
            "Hi. %(commenter)s left a comment on your experiment. "
            "Have a look: %(url)s",
            commenter=commenter_name,
            url=self.entity_url(entity),
        )
        body += self.footer.format(site_name=config.site_name)

        return Message(
            subject,
            sender=(config.site_name, config.mail_from),
            recipients=[(owner.fullname, owner.email)],
            body=body,
        )
