"""
Persistence backends for the workout log blob.
"""
from .blob_store import MemoryBlobStore, SqlBlobStore

__all__ = [
    "MemoryBlobStore",
    "SqlBlobStore",
]
