"""Models used by labbook.

All models are imported here, so that they are registered on `db.metadata`
before tables get created.
"""
from .base import db
from .comment import ExperimentComment, ItemComment, comment_model_for
from .entities import DATABASE_ITEM, EXPERIMENT, EntityType, Experiment, Item
from .subjects import User

__all__ = [
    "db",
    "User",
    "EntityType",
    "EXPERIMENT",
    "DATABASE_ITEM",
    "Experiment",
    "Item",
    "ExperimentComment",
    "ItemComment",
    "comment_model_for",
]
