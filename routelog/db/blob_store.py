"""
Blob store backends.

Both keep exactly one serialized workout log under a single key.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from routelog.shared.errors import PersistenceError
from .models import StoredBlob

logger = logging.getLogger(__name__)


class MemoryBlobStore:
    """Process-local blob store, for tests and throwaway sessions."""

    def __init__(self, data: Optional[bytes] = None):
        self._data = data

    def get(self) -> Optional[bytes]:
        return self._data

    def set(self, data: bytes) -> None:
        self._data = bytes(data)


class SqlBlobStore:
    """
    Blob store backed by one row of the stored_blobs table.

    Each get/set runs in its own short session.
    """

    def __init__(self, session_factory: sessionmaker, key: str):
        """
        Initialize store.

        Args:
            session_factory: SQLAlchemy session factory
            key: Row key holding the blob
        """
        self._session_factory = session_factory
        self.key = key

    def get(self) -> Optional[bytes]:
        """
        Read the blob.

        Raises:
            PersistenceError: If the database cannot be read
        """
        try:
            with self._session_factory() as db:
                row = db.get(StoredBlob, self.key)
                return bytes(row.value) if row is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to read blob {self.key!r}: {e}")
            raise PersistenceError(f"Failed to read blob {self.key!r}") from e

    def set(self, data: bytes) -> None:
        """
        Replace the blob.

        Raises:
            PersistenceError: If the write fails; nothing is committed
        """
        try:
            with self._session_factory() as db:
                self._upsert(db, data)
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to write blob {self.key!r}: {e}")
            raise PersistenceError(f"Failed to write blob {self.key!r}") from e

    def _upsert(self, db: Session, data: bytes) -> None:
        row = db.get(StoredBlob, self.key)
        if row is None:
            db.add(StoredBlob(key=self.key, value=data))
        else:
            row.value = data
