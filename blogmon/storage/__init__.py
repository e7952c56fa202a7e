"""
Storage module.

Interfaces for reading posts and writing results, plus an in-memory backend.
"""

from blogmon.storage.base import DocumentSource, ResultStore, UpsertResult
from blogmon.storage.memory import MemoryStorage

__all__ = [
    "DocumentSource",
    "ResultStore",
    "UpsertResult",
    "MemoryStorage",
]
