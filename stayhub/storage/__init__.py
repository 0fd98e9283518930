"""Persisted storage backends."""

from stayhub.storage.base import KeyValueStorage
from stayhub.storage.memory import InMemoryStorage
from stayhub.storage.sql import SqlStorage

__all__ = ["KeyValueStorage", "InMemoryStorage", "SqlStorage"]
