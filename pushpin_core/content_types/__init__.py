"""Content type registry and share-link based document access."""

from .documents import OpenedDocument, create_document, open_document_link
from .registry import (
    ContentType,
    get_content_type,
    list_content_types,
    register_content_type,
    reset_content_types,
    temporary_content_type,
    unregister_content_type,
)

__all__ = [
    "ContentType",
    "OpenedDocument",
    "create_document",
    "get_content_type",
    "list_content_types",
    "open_document_link",
    "register_content_type",
    "reset_content_types",
    "temporary_content_type",
    "unregister_content_type",
]
