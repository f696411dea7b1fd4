"""
Typed errors raised by the hard document operations.
"""


class FileDbError(Exception):
    """Base class for document store errors."""

    code = "FILEDB_ERROR"

    def __init__(self, doc_id: str, message: str):
        super().__init__(message)
        self.doc_id = doc_id


class ConflictError(FileDbError):
    """Raised by create when the document already exists."""

    code = "CONFLICT_WITH_EXISTING_DOCUMENT"

    def __init__(self, doc_id: str):
        super().__init__(doc_id, f"Document ({doc_id}) exists")


class NotFoundError(FileDbError):
    """Raised by update when the document does not exist."""

    code = "DOCUMENT_NOT_FOUND"

    def __init__(self, doc_id: str):
        super().__init__(doc_id, f"Document ({doc_id}) does not exist")


__all__ = [
    "FileDbError",
    "ConflictError",
    "NotFoundError",
]
