"""
app/store/base.py

Abstract interface for the storage gateway.

Services depend only on this interface, never on the MongoDB driver,
so tests can swap in an in-memory implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from app.models.application_models import ApplicationRecord


class ApplicationStore(ABC):
    """
    Contract every application store backend must fulfil.

    Only create and list-all exist; stored applications are never
    updated or deleted through the service.
    """

    @abstractmethod
    async def insert(self, record: ApplicationRecord) -> None:
        """
        Persist one record as a new document.

        Raises:
            StoreConnectError: The store could not be reached.
            StoreWriteError:   The insert itself failed.
        """

    @abstractmethod
    async def find_all(self) -> List[ApplicationRecord]:
        """
        Return every stored record, in store order. No pagination.

        Raises:
            StoreConnectError:  The store could not be reached.
            StoreQueryError:    The query failed.
            SerializationError: A stored document could not be decoded.
        """
