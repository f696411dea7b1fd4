"""
Data models for directory entries, write modes and stored documents.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

IDENTITY_FIELD = "_id"
DOCUMENT_SUFFIX = ".json"


class WriteMode(Enum):
    """File write modes supported by the storage layer."""

    EXCLUSIVE = "x"
    OVERWRITE = "w"

    @property
    def flag(self) -> str:
        """Binary open() flag for this mode."""
        return f"{self.value}b"


@dataclass(frozen=True)
class DirectoryEntry:
    """An immediate child of a listed directory."""

    name: str
    base_name: str
    full_path: str


@dataclass(frozen=True)
class Document:
    """A stored JSON value, tagged as composite (object) or scalar.

    Only JSON objects are composite. Arrays, strings, numbers, booleans
    and null are scalars: they never receive an identity field and are
    replaced wholesale on update.
    """

    doc_id: str
    value: Any

    @property
    def is_composite(self) -> bool:
        """True when the stored value is a JSON object."""
        return isinstance(self.value, dict)

    @classmethod
    def from_bytes(cls, doc_id: str, content: bytes) -> "Document":
        """Parse raw file content into a document."""
        return cls(doc_id=doc_id, value=json.loads(content.decode("utf-8")))

    def to_bytes(self) -> bytes:
        """Serialize the bare value; identity is never written."""
        return json.dumps(self.value, ensure_ascii=False).encode("utf-8")

    def merged_with(self, data: Any) -> "Document":
        """Return the document that results from updating with data."""
        if not (self.is_composite and isinstance(data, dict)):
            return Document(doc_id=self.doc_id, value=data)

        merged: Dict[str, Any] = {}
        for key, value in self.value.items():
            merged[key] = value
        for key, value in data.items():
            merged[key] = value
        return Document(doc_id=self.doc_id, value=merged)

    def to_result(self, identity_field: str = IDENTITY_FIELD) -> Any:
        """Value handed back to callers, with identity for composites."""
        if not self.is_composite:
            return self.value

        result: Dict[str, Any] = {}
        for key, value in self.value.items():
            result[key] = value
        result[identity_field] = self.doc_id
        return result
