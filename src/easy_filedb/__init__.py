"""
File-backed document store - Maps collections to directories and
documents to JSON files, with create/read/update/delete/list semantics.

This package provides a layered approach with separate components for
path resolution, raw storage operations and per-collection documents.
"""

from .errors import ConflictError, FileDbError, NotFoundError
from .factory import create_collection_store, create_database
from .manager import Database
from .path_manager import PathManager
from .repository import CollectionStore
from .storage import Storage

__all__ = [
    "create_collection_store",
    "create_database",
    "CollectionStore",
    "ConflictError",
    "Database",
    "FileDbError",
    "NotFoundError",
    "PathManager",
    "Storage",
]
