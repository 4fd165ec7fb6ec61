"""Authentication: password login, logout, Flask-Login integration."""
from .service import AuthService

__all__ = ["AuthService"]
