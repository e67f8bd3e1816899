"""Exception hierarchy for Pushpin Core.

All exceptions inherit from PushpinCoreError. Share link failures form their own
branch under ShareLinkError so callers can catch every codec rejection at once
while still distinguishing the individual kinds.
"""


class PushpinCoreError(Exception):
    """Base exception for all Pushpin Core errors."""


class ShareLinkError(PushpinCoreError):
    """Base exception for share link encoding and parsing failures."""


class EmptyInputError(ShareLinkError):
    """Raised when an empty value is parsed as a share link."""


class MalformedLinkError(ShareLinkError):
    """Raised when a value does not have the `<scheme>://<type>/<id>/<checksum>` layout."""


class MissingTypeError(ShareLinkError):
    """Raised when the content type segment is empty."""


class MissingIdentifierError(ShareLinkError):
    """Raised when the document identifier segment is empty."""


class InvalidContentTypeError(ShareLinkError):
    """Raised when a content type tag contains characters that cannot appear in a share link."""


class InvalidInternalIdentifierError(ShareLinkError):
    """Raised when encode is given something other than a well-formed hypermerge URL."""


class ChecksumMismatchError(ShareLinkError):
    """Raised when the embedded checksum does not match the one recomputed from the link body.

    Attributes:
        expected: Checksum recomputed from the body, as 4 hex digits.
        actual: Checksum carried by the link, decoded from its token.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Failed CRC check: {expected} should have been {actual}")


class UnsupportedSchemeError(ShareLinkError):
    """Raised when a checksum-valid link uses a scheme other than pushpin."""

    def __init__(self, scheme: str, expected: str) -> None:
        self.scheme = scheme
        self.expected = expected
        super().__init__(f"Invalid url scheme: {scheme} (expected {expected})")


class DocumentStoreError(PushpinCoreError):
    """Base exception for document store failures."""


class DocumentNotFoundError(DocumentStoreError):
    """Raised when an internal identifier does not resolve to a stored document."""

    def __init__(self, internal_id: str) -> None:
        self.internal_id = internal_id
        super().__init__(f"Document not found: {internal_id}")


class ContentTypeError(PushpinCoreError):
    """Base exception for content type registry errors."""


class ContentTypeNotFoundError(ContentTypeError):
    """Raised when no content type is registered for a type tag."""

    def __init__(self, type_tag: str) -> None:
        self.type_tag = type_tag
        super().__init__(f"No content type registered for '{type_tag}'")


class ContentTypeAlreadyRegisteredError(ContentTypeError):
    """Raised when registering a type tag that is already taken."""

    def __init__(self, type_tag: str) -> None:
        self.type_tag = type_tag
        super().__init__(f"Content type already registered: '{type_tag}'. Unregister it first to replace it.")
