"""Thread-safe content type registry.

Maps the type tag carried in a share link to the content type that owns
documents of that kind. Each content type may provide an initializer that
builds the starting body of a new document.

For testing, use reset_content_types() or the temporary_content_type()
context manager to register types without leaking them between tests.
"""

import re
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from pushpin_core.exceptions import (
    ContentTypeAlreadyRegisteredError,
    ContentTypeNotFoundError,
    InvalidContentTypeError,
)
from pushpin_core.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

__all__ = [
    "ContentType",
    "get_content_type",
    "list_content_types",
    "register_content_type",
    "reset_content_types",
    "temporary_content_type",
    "unregister_content_type",
]

_TYPE_TAG_PATTERN = re.compile(r"\w+", re.ASCII)

DocumentInitializer = Callable[..., dict[str, Any]]


class ContentType(BaseModel):
    """A kind of document that share links can point at.

    Attributes:
        type: Tag used in share links, e.g. "board" or "mindmap".
        name: Human-readable name.
        icon: Icon identifier for presentation layers.
        create: Builds the initial document body from keyword attributes.
            When None, new documents start empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    name: str
    icon: str = ""
    create: DocumentInitializer | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        if not _TYPE_TAG_PATTERN.fullmatch(v):
            raise InvalidContentTypeError(f"type must contain only letters, digits and underscores: {v!r}")
        return v

    def initial_document(self, **attrs: Any) -> dict[str, Any]:
        """Build the body of a new document of this type."""
        if self.create is None:
            return {}
        return self.create(**attrs)


# Global state protected by lock
_content_types: dict[str, ContentType] = {}
_lock = threading.Lock()


def register_content_type(content_type: ContentType) -> None:
    """Register a content type under its tag.

    Raises:
        ContentTypeAlreadyRegisteredError: If the tag is taken. Call
            unregister_content_type() first to replace it.
    """
    with _lock:
        if content_type.type in _content_types:
            raise ContentTypeAlreadyRegisteredError(content_type.type)
        _content_types[content_type.type] = content_type
    logger.debug(f"Registered content type '{content_type.type}'")


def unregister_content_type(type_tag: str) -> None:
    """Remove a content type. No-op if the tag is not registered."""
    with _lock:
        _content_types.pop(type_tag, None)


def get_content_type(type_tag: str) -> ContentType:
    """Get the content type registered for a tag.

    Raises:
        ContentTypeNotFoundError: If nothing is registered under the tag.
    """
    with _lock:
        content_type = _content_types.get(type_tag)
    if content_type is None:
        raise ContentTypeNotFoundError(type_tag)
    return content_type


def list_content_types() -> list[ContentType]:
    """All registered content types, sorted by tag."""
    with _lock:
        return [_content_types[tag] for tag in sorted(_content_types)]


def reset_content_types() -> None:
    """Remove every registration. Primarily for testing."""
    with _lock:
        _content_types.clear()


@contextmanager
def temporary_content_type(content_type: ContentType) -> Iterator[ContentType]:
    """Register a content type for the duration of the block.

    Any registration previously held by the same tag is restored on exit.
    """
    with _lock:
        previous = _content_types.get(content_type.type)
        _content_types[content_type.type] = content_type
    try:
        yield content_type
    finally:
        with _lock:
            if previous is None:
                _content_types.pop(content_type.type, None)
            else:
                _content_types[content_type.type] = previous
