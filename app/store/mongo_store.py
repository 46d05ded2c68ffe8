"""
app/store/mongo_store.py

MongoDB implementation of the ApplicationStore interface.

A fresh client is opened for every call and closed when the call ends;
no connection is held between requests. All driver-specific details are
contained here — the rest of the application never imports ``pymongo``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from bson.errors import BSONError
from pydantic import ValidationError
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import ConnectionFailure, PyMongoError

from app.core.config import settings
from app.core.exceptions import (
    SerializationError,
    StoreConnectError,
    StoreQueryError,
    StoreWriteError,
)
from app.core.logger import get_logger
from app.models.application_models import ApplicationRecord
from app.store.base import ApplicationStore

logger = get_logger(__name__)


class MongoApplicationStore(ApplicationStore):
    """
    ApplicationStore backed by one MongoDB collection.

    Construction is cheap and does not touch the network, so a module-level
    singleton can be created at import time.
    """

    def __init__(
        self,
        uri: str | None = None,
        database: str | None = None,
        collection: str | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """
        Args:
            uri             : Connection string. Defaults to ``settings.mongo_uri``.
            database        : Database name. Defaults to ``settings.mongo_database``.
            collection      : Collection name. Defaults to ``settings.mongo_collection``.
            timeout_seconds : Bound for server selection, connect and each
                              operation. Defaults to ``settings.store_timeout_seconds``.
        """
        self._uri = uri or settings.mongo_uri
        self._database = database or settings.mongo_database
        self._collection_name = collection or settings.mongo_collection
        self._timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.store_timeout_seconds
        )

    # ── Connection lifecycle ───────────────────────────────────────────────────

    @asynccontextmanager
    async def _collection(self) -> AsyncIterator[AsyncCollection]:
        """Open a client, yield the applications collection, always close."""
        timeout_ms = int(self._timeout_seconds * 1000)
        try:
            client: AsyncMongoClient = AsyncMongoClient(
                self._uri,
                serverSelectionTimeoutMS=timeout_ms,
                connectTimeoutMS=timeout_ms,
                timeoutMS=timeout_ms,
            )
        except PyMongoError as exc:
            raise StoreConnectError(f"failed to create MongoDB client: {exc}") from exc

        logger.debug("MongoDB client opened — %s.%s", self._database, self._collection_name)
        try:
            yield client[self._database][self._collection_name]
        finally:
            try:
                await client.close()
            except PyMongoError as exc:
                logger.warning("Failed to close MongoDB client: %s", exc)

    # ── ApplicationStore interface ─────────────────────────────────────────────

    async def insert(self, record: ApplicationRecord) -> None:
        """Insert the record as one new document (blank notes omitted)."""
        async with self._collection() as collection:
            try:
                result = await collection.insert_one(record.to_document())
            except ConnectionFailure as exc:
                raise StoreConnectError(f"failed to connect to MongoDB: {exc}") from exc
            except BSONError as exc:
                raise StoreWriteError(f"application is not encodable as BSON: {exc}") from exc
            except PyMongoError as exc:
                raise StoreWriteError(f"failed to insert application: {exc}") from exc

        logger.info("Stored application %s in '%s'.", result.inserted_id, self._collection_name)

    async def find_all(self) -> List[ApplicationRecord]:
        """Load every document of the collection into memory."""
        async with self._collection() as collection:
            try:
                cursor = collection.find({}, {"_id": False})
                docs = await cursor.to_list()
            except ConnectionFailure as exc:
                raise StoreConnectError(f"failed to connect to MongoDB: {exc}") from exc
            except BSONError as exc:
                raise SerializationError(f"failed to decode stored application: {exc}") from exc
            except PyMongoError as exc:
                raise StoreQueryError(f"failed to retrieve applications: {exc}") from exc

        try:
            records = [ApplicationRecord.from_document(doc) for doc in docs]
        except ValidationError as exc:
            raise SerializationError(f"failed to decode stored application: {exc}") from exc

        logger.debug("Loaded %d application(s) from '%s'.", len(records), self._collection_name)
        return records
