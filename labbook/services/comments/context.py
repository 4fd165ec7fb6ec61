"""Values exchanged with the comment service."""
from collections import namedtuple
from typing import Any, Mapping

from labbook.core.models import EntityType
from labbook.core.singleton import UniqueName

__all__ = [
    "EntityContext",
    "NotificationConfig",
    "Ownership",
    "OWNER",
    "NOT_FOUND",
    "FORBIDDEN",
]

_EntityContextBase = namedtuple(
    "EntityContext", ("type", "id", "current_user_id", "view_page_path", "notifiable")
)


class EntityContext(_EntityContextBase):
    """The entity comments are attached to, seen by the current user.

    `view_page_path` and `notifiable` default to the values of the entity
    type.
    """

    __slots__ = ()

    def __new__(
        cls,
        entity_type,
        entity_id,
        current_user_id,
        view_page_path=None,
        notifiable=None,
    ):
        if not isinstance(entity_type, EntityType):
            name = entity_type
            entity_type = EntityType.get(name)
            if entity_type is None:
                raise ValueError(f"Unknown entity type: {name!r}")

        if view_page_path is None:
            view_page_path = entity_type.view_page_path
        if notifiable is None:
            notifiable = entity_type.notifiable

        return super().__new__(
            cls,
            entity_type,
            int(entity_id),
            int(current_user_id),
            view_page_path,
            bool(notifiable),
        )

    @classmethod
    def of(cls, entity: Any, user: Any) -> "EntityContext":
        """Context for a model instance (:class:`Experiment`, :class:`Item`)
        and a user."""
        return cls(entity.entity_type, entity.id, user.id)


_NotificationConfigBase = namedtuple(
    "NotificationConfig", ("mail_from", "enabled", "site_name", "site_url")
)


class NotificationConfig(_NotificationConfigBase):
    """Settings of the notification dispatcher.

    `enabled` is false until outgoing mail has been configured.
    """

    __slots__ = ()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "NotificationConfig":
        """Build from a Flask config mapping."""
        return cls(
            mail_from=config["MAIL_SENDER"],
            enabled=bool(config.get("MAIL_NOTIFICATIONS_ENABLED")),
            site_name=config.get("SITE_NAME") or "labbook",
            site_url=config.get("SITE_URL") or "",
        )


class Ownership(UniqueName):
    """Outcome of the authorization decision on an existing comment."""


#: current user wrote the comment
OWNER = Ownership("owner")
#: no comment with this id
NOT_FOUND = Ownership("not_found")
#: comment exists but somebody else wrote it
FORBIDDEN = Ownership("forbidden")
