"""
Centralized authority for database, collection and document paths.

Path computation only: nothing here touches the filesystem.
"""

import os
from typing import Optional

from .models import DOCUMENT_SUFFIX


class PathManager:
    """Maps (database, collection, document id) to filesystem paths.

    Collection names and document ids are joined as given. They are not
    sanitized, so a value containing a path separator or ``..`` resolves
    outside its collection directory.
    """

    DEFAULT_DATABASE_NAME = ".data"
    DATABASE_NAME_ENV = "FILEDB_DATABASE_NAME"

    def __init__(
        self,
        database_name: str = DEFAULT_DATABASE_NAME,
        base_dir: Optional[str] = None,
    ):
        """Initialize with a database name and optional base directory."""
        self.database_name = database_name or self.DEFAULT_DATABASE_NAME
        self.base_dir = base_dir if base_dir is not None else os.getcwd()

    def get_database_root(self) -> str:
        """Get the full path to the database root directory."""
        return os.path.join(self.base_dir, self.database_name)

    def get_collection_dir(self, collection_name: str) -> str:
        """Get the full path to a collection's directory."""
        return os.path.join(self.get_database_root(), collection_name)

    def get_document_path(self, collection_name: str, doc_id: str) -> str:
        """Get the full path to a document's JSON file."""
        collection_dir = self.get_collection_dir(collection_name)
        return os.path.join(collection_dir, f"{doc_id}{DOCUMENT_SUFFIX}")
