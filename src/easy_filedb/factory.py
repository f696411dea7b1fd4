"""
Factory functions for creating Database and CollectionStore instances.

This module resolves configuration once and wires up dependencies
explicitly.
"""

import logging
import os
from typing import Optional

from .manager import Database
from .models import IDENTITY_FIELD
from .path_manager import PathManager
from .repository import CollectionStore
from .storage import Storage


def resolve_database_name(database_name: Optional[str] = None) -> str:
    """Pick the database name: argument, then environment, then default.

    Empty values fall through to the next source.
    """
    if database_name:
        return database_name
    return (
        os.getenv(PathManager.DATABASE_NAME_ENV)
        or PathManager.DEFAULT_DATABASE_NAME
    )


def _create_dependencies(
    database_name: Optional[str], base_dir: Optional[str]
) -> tuple[PathManager, Storage]:
    """Create shared dependencies for Database and CollectionStore."""
    path_manager = PathManager(resolve_database_name(database_name), base_dir)
    storage = Storage()
    return path_manager, storage


def create_database(
    database_name: Optional[str] = None,
    base_dir: Optional[str] = None,
    identity_field: str = IDENTITY_FIELD,
) -> Database:
    """Create a Database and make sure its root directory exists."""
    logger = logging.getLogger(__name__)
    path_manager, storage = _create_dependencies(database_name, base_dir)

    database = Database(path_manager, storage, identity_field=identity_field)
    database.initialize()

    logger.debug("Created database '%s'", path_manager.database_name)
    return database


def create_collection_store(
    collection_name: str,
    database_name: Optional[str] = None,
    base_dir: Optional[str] = None,
    identity_field: str = IDENTITY_FIELD,
    max_workers: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> CollectionStore:
    """Create a CollectionStore without initializing the database."""
    path_manager, storage = _create_dependencies(database_name, base_dir)
    return CollectionStore(
        collection_name,
        path_manager,
        storage,
        identity_field=identity_field,
        max_workers=max_workers,
        logger=logger,
    )
