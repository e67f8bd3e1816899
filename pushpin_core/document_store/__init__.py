"""Document store protocol and backends that share links resolve through."""

from ._models import DocumentHandle
from .factory import create_document_store
from .protocol import DocumentStore, get_document_store, set_document_store

__all__ = [
    "DocumentHandle",
    "DocumentStore",
    "create_document_store",
    "get_document_store",
    "set_document_store",
]
