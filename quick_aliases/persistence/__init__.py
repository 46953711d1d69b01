"""Persistence layer -- the store owns its file path, data format, and I/O."""

from ._base import CorruptStoreError, JsonStore
from .aliases import AliasStore, add, remove, remove_all

__all__ = [
    "AliasStore",
    "CorruptStoreError",
    "JsonStore",
    "add",
    "remove",
    "remove_all",
]
