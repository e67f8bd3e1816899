"""In-memory document store for testing.

Simple dict-based storage implementing the DocumentStore protocol.
Not for production use: all data is lost when the process exits.
"""

from pushpin_core.document_store._models import DocumentHandle
from pushpin_core.links import HypermergeUrl
from pushpin_core.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)


class MemoryDocumentStore:
    """Dict-based document store keyed by internal identifier."""

    def __init__(self) -> None:
        self._documents: dict[str, DocumentHandle] = {}  # internal_id -> handle

    async def resolve(self, internal_id: HypermergeUrl) -> DocumentHandle | None:
        """Return the stored handle, or None."""
        return self._documents.get(internal_id)

    async def save(self, handle: DocumentHandle) -> None:
        """Store the handle in memory, replacing any previous version."""
        self._documents[handle.internal_id] = handle
        logger.debug(f"Saved {handle.internal_id} ({len(self._documents)} in memory)")

    async def exists(self, internal_id: HypermergeUrl) -> bool:
        """Check whether the identifier has been saved."""
        return internal_id in self._documents
