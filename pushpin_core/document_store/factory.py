"""Factory function for creating document store instances based on settings."""

from pathlib import Path

from pushpin_core.document_store.protocol import DocumentStore
from pushpin_core.settings import Settings


def create_document_store(settings: Settings) -> DocumentStore:
    """Create a DocumentStore based on settings.

    Selects LocalDocumentStore when pushpin_store_path is configured,
    otherwise falls back to MemoryDocumentStore.

    Backends are imported lazily to avoid circular imports.
    """
    if settings.pushpin_store_path:
        from pushpin_core.document_store.local import LocalDocumentStore

        return LocalDocumentStore(Path(settings.pushpin_store_path))

    from pushpin_core.document_store.memory import MemoryDocumentStore

    return MemoryDocumentStore()
