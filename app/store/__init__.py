"""app/store/__init__.py — public API of the store package."""

from app.store.base import ApplicationStore
from app.store.mongo_store import MongoApplicationStore

__all__ = [
    "ApplicationStore",
    "MongoApplicationStore",
]
