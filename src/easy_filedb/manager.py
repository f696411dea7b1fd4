"""
Database-level orchestration: root lifecycle and collection handles.
"""

import logging
import os
from typing import List, Optional

from .models import IDENTITY_FIELD
from .path_manager import PathManager
from .repository import CollectionStore
from .storage import Storage


class Database:
    """A database root directory and the collections inside it."""

    def __init__(
        self,
        path_manager: PathManager,
        storage: Storage,
        identity_field: str = IDENTITY_FIELD,
    ):
        """Initialize with dependencies."""
        self.logger = logging.getLogger(__name__)
        self.path_manager = path_manager
        self.storage = storage
        self.identity_field = identity_field

    @property
    def root(self) -> str:
        """Full path to the database root directory."""
        return self.path_manager.get_database_root()

    def initialize(self) -> str:
        """Create the root directory if needed and return its path."""
        self.storage.create_directory(self.root)
        self.logger.info("Database initialized at %s", self.root)
        return self.root

    def collection(
        self, name: str, max_workers: Optional[int] = None
    ) -> CollectionStore:
        """Get a store bound to the named collection.

        The collection directory is created on the first successful
        create, not here.
        """
        return CollectionStore(
            name,
            self.path_manager,
            self.storage,
            identity_field=self.identity_field,
            max_workers=max_workers,
        )

    def list_collections(self) -> List[str]:
        """List collection names; empty if the root does not exist."""
        try:
            entries = self.storage.list_entries(self.root)
        except OSError as e:
            self.logger.debug("Failed to list collections: %s", e)
            return []
        return [
            entry.name for entry in entries if os.path.isdir(entry.full_path)
        ]

    def drop_collection(self, name: str) -> None:
        """Remove a collection directory and all its documents."""
        collection_dir = self.path_manager.get_collection_dir(name)
        self.storage.remove_directory(collection_dir)
        self.logger.info("Dropped collection %s", name)

    def drop(self) -> None:
        """Remove the database root and everything under it."""
        self.storage.remove_directory(self.root)
        self.logger.info("Dropped database at %s", self.root)
