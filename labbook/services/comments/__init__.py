"""Comments on experiments and database items."""
from .context import FORBIDDEN, NOT_FOUND, OWNER, EntityContext, \
    NotificationConfig, Ownership
from .gateway import CommentGateway, CommentRow
from .notifications import NotificationDispatcher
from .sanitizer import prepare
from .service import CommentsService, CommentService

__all__ = [
    "CommentGateway",
    "CommentRow",
    "CommentService",
    "CommentsService",
    "EntityContext",
    "FORBIDDEN",
    "NOT_FOUND",
    "NotificationConfig",
    "NotificationDispatcher",
    "OWNER",
    "Ownership",
    "prepare",
]
