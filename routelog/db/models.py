"""
Database models.

The workout log is persisted as a single serialized blob per key.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, LargeBinary, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoredBlob(Base):
    """One keyed byte blob."""

    __tablename__ = "stored_blobs"

    key = Column(String(100), primary_key=True)
    value = Column(LargeBinary, nullable=False)

    # Timestamps
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f"<StoredBlob {self.key} ({len(self.value or b'')} bytes)>"
