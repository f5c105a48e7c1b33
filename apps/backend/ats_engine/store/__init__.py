from .base import HistoryStore
from .memory import InMemoryHistoryStore
from .sql import SQLHistoryStore

__all__ = ["HistoryStore", "InMemoryHistoryStore", "SQLHistoryStore"]
