"""Creating and opening documents through share links.

Both entry points take an explicit store, or fall back to the process-global
store set with set_document_store().
"""

from dataclasses import dataclass
from typing import Any

from pushpin_core.document_store import DocumentHandle, DocumentStore, get_document_store
from pushpin_core.exceptions import DocumentNotFoundError, DocumentStoreError
from pushpin_core.links import PushpinUrl, ShareLinkParts, create_document_link, new_hypermerge_url, parse_document_link
from pushpin_core.logging import get_pipeline_logger

from .registry import ContentType, get_content_type

logger = get_pipeline_logger(__name__)

__all__ = ["OpenedDocument", "create_document", "open_document_link"]


@dataclass(frozen=True, slots=True)
class OpenedDocument:
    """A share link resolved to its content type and stored document."""

    parts: ShareLinkParts
    content_type: ContentType
    handle: DocumentHandle


def _require_store(store: DocumentStore | None) -> DocumentStore:
    """Return store, or the global store when None."""
    if store is not None:
        return store
    global_store = get_document_store()
    if global_store is None:
        raise DocumentStoreError("No document store configured. Pass a store or call set_document_store() first.")
    return global_store


async def create_document(type_tag: str, store: DocumentStore | None = None, **attrs: Any) -> PushpinUrl:
    """Create a new document of a registered content type.

    Mints a fresh internal identifier, builds the initial body with the content
    type's initializer, saves it to the store, and returns its share link.

    Args:
        type_tag: Registered content type tag.
        store: Store the new document is saved to. Defaults to the global store.
        **attrs: Passed to the content type's initializer.

    Raises:
        ContentTypeNotFoundError: If type_tag is not registered.
        DocumentStoreError: If no store is passed and no global store is set.
    """
    content_type = get_content_type(type_tag)
    target = _require_store(store)
    internal_id = new_hypermerge_url()
    await target.save(DocumentHandle(internal_id=internal_id, doc=content_type.initial_document(**attrs)))
    link = create_document_link(content_type.type, internal_id)
    logger.info(f"Created {content_type.type} document {link}")
    return link


async def open_document_link(link: str, store: DocumentStore | None = None) -> OpenedDocument:
    """Parse a share link and resolve it to a content type and document.

    Raises:
        ShareLinkError: Any parse failure, unchanged.
        ContentTypeNotFoundError: If the link's type tag is not registered.
        DocumentStoreError: If no store is passed and no global store is set.
        DocumentNotFoundError: If the store has no document under the identifier.
    """
    parts = parse_document_link(link)
    content_type = get_content_type(parts.type)
    handle = await _require_store(store).resolve(parts.internal_id)
    if handle is None:
        raise DocumentNotFoundError(parts.internal_id)
    return OpenedDocument(parts=parts, content_type=content_type, handle=handle)
