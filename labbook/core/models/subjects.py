"""Users of the notebook."""
from abc import ABCMeta, abstractmethod
from typing import Optional

import bcrypt
from flask_login import UserMixin
from sqlalchemy import sql
from sqlalchemy.schema import Column, UniqueConstraint
from sqlalchemy.types import Boolean, Integer, UnicodeText

from .base import db

__all__ = (
    "User",
    "ClearPasswordStrategy",
    "BcryptPasswordStrategy",
)


class PasswordStrategy(metaclass=ABCMeta):
    @property
    @abstractmethod
    def name(self):
        """Strategy name."""

    @abstractmethod
    def authenticate(self, user, password):
        """Predicate to tell wether password match user's or not."""

    @abstractmethod
    def process(self, user, password):
        """Return a string to be stored as user password."""


class ClearPasswordStrategy(PasswordStrategy):
    """Don't encrypt at all.

    This strategy should not ever be used elsewhere than in tests. It's
    useful in tests since a hash like bcrypt is designed to be slow.
    """

    @property
    def name(self):
        return "clear"

    def authenticate(self, user, password):
        return user.password == password

    def process(self, user, password):
        if not isinstance(password, str):
            password = password.decode("utf-8")
        return password


class BcryptPasswordStrategy(PasswordStrategy):
    """Hash passwords using bcrypt."""

    @property
    def name(self):
        return "bcrypt"

    def authenticate(self, user: "User", password: str) -> bool:
        current_passwd = user.password
        # crypt work only on bytes, not str (Unicode)
        if isinstance(current_passwd, str):
            current_passwd = current_passwd.encode("utf-8")
        if isinstance(password, str):
            password = password.encode("utf-8")

        return bcrypt.checkpw(password, current_passwd)

    def process(self, user: "User", password: str) -> str:
        if isinstance(password, str):
            password = password.encode("utf-8")
        return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


class User(UserMixin, db.Model):
    __tablename__ = "users"

    __password_strategy__ = BcryptPasswordStrategy()

    id = Column("userid", Integer, primary_key=True)

    first_name = Column("firstname", UnicodeText, nullable=False, default="")
    last_name = Column("lastname", UnicodeText, nullable=False, default="")
    email = Column(UnicodeText, nullable=False)

    #: bcrypt hash. "*" means no password has ever been set
    password = Column(UnicodeText, nullable=False, default="*")

    #: only validated accounts can login
    validated = Column(Boolean, nullable=False, default=True)
    is_admin = Column(Boolean, nullable=False, default=False)

    __table_args__ = (UniqueConstraint("email"),)

    def __init__(self, password: Optional[str] = None, **kwargs) -> None:
        db.Model.__init__(self, **kwargs)

        if password is not None:
            self.set_password(password)
            self._password = password

    @classmethod
    def get_by_email(cls, email: str) -> Optional["User"]:
        query = sql.select(cls).where(sql.func.lower(cls.email) == email.lower())
        return db.session.execute(query).scalar_one_or_none()

    def authenticate(self, password: str) -> bool:
        if self.password and self.password != "*":
            return self.__password_strategy__.authenticate(self, password)
        else:
            return False

    def set_password(self, password: str) -> None:
        """Encrypts and sets password."""
        self.password = self.__password_strategy__.process(self, password)

    @property
    def is_active(self) -> bool:
        return bool(self.validated)

    @property
    def fullname(self) -> str:
        name = f"{(self.first_name or '')} {(self.last_name or '')}"
        return name.strip() or "Unknown"

    def __str__(self) -> str:
        return self.fullname

    def __repr__(self):
        cls = self.__class__
        return "<{mod}.{cls} id={id!r} email={email!r} at 0x{addr:x}>".format(
            mod=cls.__module__,
            cls=cls.__name__,
            id=self.id,
            email=self.email,
            addr=id(self),
        )
