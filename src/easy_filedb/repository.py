"""
Document repository bound to a single collection.

Each document is one JSON file inside the collection directory. The file
is the only record of the document's existence; there is no index.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional

from .errors import ConflictError, NotFoundError
from .models import IDENTITY_FIELD, Document, WriteMode
from .path_manager import PathManager
from .storage import Storage


class CollectionStore:
    """Create, read, update, delete and list documents in a collection.

    create and update raise for their expected failure and let any other
    OSError through. get and delete never raise; failures surface as
    None and False and are only visible in the log.

    No locking is done. Concurrent creates of the same id are settled by
    the exclusive-create write, so exactly one wins. update is a read
    followed by a write, so two concurrent updates of one document can
    lose one of the changes.
    """

    def __init__(
        self,
        collection_name: str,
        path_manager: PathManager,
        storage: Storage,
        identity_field: str = IDENTITY_FIELD,
        max_workers: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize with the collection name and shared dependencies."""
        self.collection_name = collection_name
        self.path_manager = path_manager
        self.storage = storage
        self.identity_field = identity_field
        self.max_workers = max_workers
        self.logger = logger or logging.getLogger(__name__)

    def get_collection_dir(self) -> str:
        """Get the directory backing this collection."""
        return self.path_manager.get_collection_dir(self.collection_name)

    def get_document_path(self, doc_id: str) -> str:
        """Get the JSON file path for a document id."""
        return self.path_manager.get_document_path(
            self.collection_name, doc_id
        )

    def create(self, doc_id: str, data: Any) -> Any:
        """Store a new document and return it with its identity field."""
        self.storage.create_directory(self.get_collection_dir())

        document = Document(doc_id=doc_id, value=data)
        content = document.to_bytes()
        try:
            self.storage.write_file(
                self.get_document_path(doc_id), content, WriteMode.EXCLUSIVE
            )
        except FileExistsError as e:
            raise ConflictError(doc_id) from e

        self.logger.debug(
            "Created document %s in %s", doc_id, self.collection_name
        )
        return document.to_result(self.identity_field)

    def get(self, doc_id: str) -> Any:
        """Return the document, or None if it is missing or unreadable."""
        document = self._load(doc_id)
        if document is None:
            return None
        return document.to_result(self.identity_field)

    def get_all(self) -> List[Any]:
        """Return every document in the collection, in listing order.

        Entries are read concurrently. Raises the listing OSError when the
        collection directory does not exist.
        """
        entries = self.storage.list_entries(self.get_collection_dir())
        if not entries:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(
                executor.map(self.get, [entry.base_name for entry in entries])
            )

    def update(self, doc_id: str, data: Any) -> Any:
        """Merge data into an existing document and return the result.

        Object payloads over object documents are shallow-merged, with
        keys from data taking precedence. Anything else replaces the
        stored value.
        """
        existing = self._load(doc_id)
        if existing is None:
            raise NotFoundError(doc_id)

        updated = existing.merged_with(data)
        self.storage.write_file(
            self.get_document_path(doc_id),
            updated.to_bytes(),
            WriteMode.OVERWRITE,
        )

        self.logger.debug(
            "Updated document %s in %s", doc_id, self.collection_name
        )
        return updated.to_result(self.identity_field)

    def delete(self, doc_id: str) -> bool:
        """Delete a document, returning whether a file was removed."""
        try:
            self.storage.delete_file(self.get_document_path(doc_id))
        except OSError as e:
            self.logger.debug("Failed to delete document %s: %s", doc_id, e)
            return False

        self.logger.debug(
            "Deleted document %s from %s", doc_id, self.collection_name
        )
        return True

    def _load(self, doc_id: str) -> Optional[Document]:
        """Read and parse a document, None on any read or decode error."""
        try:
            content = self.storage.read_file(self.get_document_path(doc_id))
            return Document.from_bytes(doc_id, content)
        except (OSError, ValueError) as e:
            self.logger.debug("Failed to load document %s: %s", doc_id, e)
            return None
