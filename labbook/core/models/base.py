""""""
from sqlalchemy.schema import Column
from sqlalchemy.types import Integer

from labbook.core.extensions import db

__all__ = ["db", "IdMixin"]


class IdMixin:
    id = Column(Integer, primary_key=True)
