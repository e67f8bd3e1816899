"""Pushpin Core - typed, checksummed share links for content-addressed documents.

Pushpin documents live in an external document store under internal
identifiers (`hypermerge:/<id>`). Share links (`pushpin://<type>/<id>/<checksum>`)
carry the identifier together with the document's content type and a CRC-16
checksum, so a mistyped or truncated link is rejected instead of silently
pointing at the wrong document.

Core Capabilities:
    - **Link Codec**: encode and parse share links with checksum verification
    - **Document Store**: protocol for resolving internal identifiers, with
      in-memory and local JSON backends
    - **Content Types**: registry mapping type tags to document initializers

Quick Start:
    >>> from pushpin_core import create_document_link, parse_document_link, HypermergeUrl
    >>>
    >>> link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
    >>> parts = parse_document_link(link)
    >>> parts.internal_id
    'hypermerge:/abc123'

Environment Variables:
    - PUSHPIN_STORE_PATH: Directory for the local JSON document store
    - PUSHPIN_LOG_LEVEL: Log level for pushpin_core loggers
"""

from .content_types import (
    ContentType,
    OpenedDocument,
    create_document,
    get_content_type,
    open_document_link,
    register_content_type,
)
from .document_store import DocumentHandle, DocumentStore, create_document_store
from .exceptions import (
    ChecksumMismatchError,
    ContentTypeNotFoundError,
    DocumentNotFoundError,
    EmptyInputError,
    InvalidContentTypeError,
    InvalidInternalIdentifierError,
    MalformedLinkError,
    MissingIdentifierError,
    MissingTypeError,
    PushpinCoreError,
    ShareLinkError,
    UnsupportedSchemeError,
)
from .links import (
    HypermergeUrl,
    PushpinUrl,
    ShareLinkParts,
    create_document_link,
    is_hypermerge_url,
    is_pushpin_url,
    is_valid_checksum,
    new_hypermerge_url,
    parse_document_link,
)
from .logging import get_pipeline_logger as get_logger
from .logging import setup_logging
from .settings import settings

__version__ = "0.1.0"

__all__ = [
    # Config/Settings
    "settings",
    # Logging
    "get_logger",
    "setup_logging",
    # Links
    "HypermergeUrl",
    "PushpinUrl",
    "ShareLinkParts",
    "create_document_link",
    "is_hypermerge_url",
    "is_pushpin_url",
    "is_valid_checksum",
    "new_hypermerge_url",
    "parse_document_link",
    # Document store
    "DocumentHandle",
    "DocumentStore",
    "create_document_store",
    # Content types
    "ContentType",
    "OpenedDocument",
    "create_document",
    "get_content_type",
    "open_document_link",
    "register_content_type",
    # Errors
    "PushpinCoreError",
    "ShareLinkError",
    "EmptyInputError",
    "MalformedLinkError",
    "MissingTypeError",
    "MissingIdentifierError",
    "ChecksumMismatchError",
    "UnsupportedSchemeError",
    "InvalidInternalIdentifierError",
    "InvalidContentTypeError",
    "ContentTypeNotFoundError",
    "DocumentNotFoundError",
]
