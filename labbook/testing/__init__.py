"""Elements to build test cases for an :class:`labbook.app.Application`"""
from .fixtures import TestConfig

__all__ = ("TestConfig",)
