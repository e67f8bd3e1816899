"""Document store protocol and singleton management.

Defines the lookup capability share links are resolved through, along with
get/set helpers for the process-global singleton.
"""

from typing import Protocol, runtime_checkable

from pushpin_core.document_store._models import DocumentHandle
from pushpin_core.links import HypermergeUrl


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document storage backends.

    Implementations: LocalDocumentStore (JSON files), MemoryDocumentStore (testing).
    """

    async def resolve(self, internal_id: HypermergeUrl) -> DocumentHandle | None:
        """Look up a document by internal identifier. Returns None when it is not stored."""
        ...

    async def save(self, handle: DocumentHandle) -> None:
        """Store a document, replacing any previous version under the same identifier."""
        ...

    async def exists(self, internal_id: HypermergeUrl) -> bool:
        """Check whether a document is stored under the identifier."""
        ...


_document_store: DocumentStore | None = None


def get_document_store() -> DocumentStore | None:
    """Get the process-global document store singleton."""
    return _document_store


def set_document_store(store: DocumentStore | None) -> None:
    """Set the process-global document store singleton."""
    global _document_store
    _document_store = store
