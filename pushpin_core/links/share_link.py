"""Share link codec.

Converts between internal document identifiers (`hypermerge:/<id>`) and typed,
checksummed share links (`pushpin://<type>/<id>/<checksum>`).

Parsing runs in two stages: a structural match that either yields every part of
the link or fails outright, then independent checks on those parts (checksum,
scheme, non-empty segments). Every rejection is a ShareLinkError subclass.

The codec holds no state and performs no I/O; all functions are safe to call
concurrently.
"""

import re
import secrets

import base58

from pushpin_core.exceptions import (
    ChecksumMismatchError,
    EmptyInputError,
    InvalidContentTypeError,
    InvalidInternalIdentifierError,
    MalformedLinkError,
    MissingIdentifierError,
    MissingTypeError,
    UnsupportedSchemeError,
)

from ._checksum import crc16, decode_token, encode_token
from ._types import EncodedParts, HypermergeUrl, PushpinUrl, ShareLinkParts

INTERNAL_PREFIX = "hypermerge:/"
SHARE_SCHEME = "pushpin"

_IDENTIFIER_PATTERN = re.compile(r"\w+", re.ASCII)
_HYPERMERGE_URL_PATTERN = re.compile(r"hypermerge:/\w+", re.ASCII)
_PUSHPIN_URL_PATTERN = re.compile(r"pushpin://\w+/\w+/\w{1,4}", re.ASCII)
_SHARE_LINK_PATTERN = re.compile(r"(?P<body>(?P<scheme>\w+)://(?P<type>\w+)/(?P<identifier>\w+))/(?P<token>\w{1,4})", re.ASCII)

# 32 random bytes, matching the key size behind hypermerge document ids
_NEW_ID_BYTES = 32


def is_hypermerge_url(value: str) -> bool:
    """Check whether a string is a well-formed internal identifier."""
    return isinstance(value, str) and _HYPERMERGE_URL_PATTERN.fullmatch(value) is not None


def is_pushpin_url(value: str) -> bool:
    """Check whether a string has the share link layout.

    Only the layout is checked. Use parse_document_link() to verify the checksum.
    """
    return isinstance(value, str) and _PUSHPIN_URL_PATTERN.fullmatch(value) is not None


def new_hypermerge_url() -> HypermergeUrl:
    """Mint a fresh internal identifier with a random base-58 bare id."""
    bare_id = base58.b58encode(secrets.token_bytes(_NEW_ID_BYTES)).decode("ascii")
    return HypermergeUrl(f"{INTERNAL_PREFIX}{bare_id}")


def with_checksum(body: str) -> str:
    """Append `/<checksum-token>` to a link body."""
    return f"{body}/{encode_token(crc16(body))}"


def is_valid_checksum(body: str, token: str) -> bool:
    """Check that a checksum token matches the checksum recomputed from body.

    Never raises: empty values and tokens outside the base-58 alphabet are
    reported as invalid.
    """
    if not body or not token:
        return False
    try:
        actual = decode_token(token)
    except ValueError:
        return False
    return crc16(body) == actual


def split_link(link: str) -> EncodedParts | None:
    """Match a string against the share link layout.

    Returns:
        Every captured part when the whole string matches, None otherwise.
    """
    match = _SHARE_LINK_PATTERN.fullmatch(link)
    if match is None:
        return None
    return EncodedParts(
        body=match["body"],
        scheme=match["scheme"],
        type=match["type"],
        identifier=match["identifier"],
        token=match["token"],
    )


def create_document_link(type: str, internal_id: HypermergeUrl) -> PushpinUrl:
    """Encode an internal identifier and content type into a share link.

    Args:
        type: Content type tag, e.g. "board". Must be identifier-safe.
        internal_id: Internal identifier in `hypermerge:/<bare-id>` form.

    Returns:
        The checksummed share link.

    Raises:
        InvalidInternalIdentifierError: If internal_id already contains the share
            scheme (a share link passed by mistake) or is not a hypermerge URL.
        MissingTypeError: If type is empty.
        InvalidContentTypeError: If type contains characters other than letters,
            digits and underscore.

    Example:
        >>> create_document_link("board", HypermergeUrl("hypermerge:/abc123"))  # doctest: +SKIP
        'pushpin://board/abc123/...'
    """
    if SHARE_SCHEME in internal_id:
        raise InvalidInternalIdentifierError(f'so-called ID contains "{SHARE_SCHEME}". you appear to have passed a URL as an ID: {internal_id}')
    if not is_hypermerge_url(internal_id):
        raise InvalidInternalIdentifierError(f"expecting a hypermerge URL as input, got {internal_id!r}")
    if not type:
        raise MissingTypeError("no type when creating URL")
    if _IDENTIFIER_PATTERN.fullmatch(type) is None:
        raise InvalidContentTypeError(f"type must contain only letters, digits and underscores: {type!r}")

    bare_id = internal_id[len(INTERNAL_PREFIX) :]
    return PushpinUrl(with_checksum(f"{SHARE_SCHEME}://{type}/{bare_id}"))


def parse_document_link(link: str) -> ShareLinkParts:
    """Parse and verify a share link.

    Checks run in order: empty input, layout, checksum, scheme, then the type
    and identifier segments. The first failing check raises.

    Args:
        link: Candidate share link.

    Returns:
        The scheme, type, bare identifier and reconstructed internal identifier.

    Raises:
        EmptyInputError: If link is empty.
        MalformedLinkError: If link does not have the share link layout, or its
            checksum token is not valid base-58.
        ChecksumMismatchError: If the checksum does not match the link body.
        UnsupportedSchemeError: If the scheme is not pushpin.
        MissingTypeError: If the type segment is empty.
        MissingIdentifierError: If the identifier segment is empty.
    """
    if not link:
        raise EmptyInputError("Cannot parse an empty value as a link.")

    parts = split_link(link)
    if parts is None:
        raise MalformedLinkError(f"Not a share link: {link!r}")

    try:
        actual = decode_token(parts.token)
    except ValueError as e:
        raise MalformedLinkError(f"Checksum token {parts.token!r} is not valid base-58 in {link!r}") from e

    expected = crc16(parts.body)
    if expected != actual:
        raise ChecksumMismatchError(expected=expected, actual=actual)

    if parts.scheme != SHARE_SCHEME:
        raise UnsupportedSchemeError(parts.scheme, SHARE_SCHEME)

    if not parts.type:
        raise MissingTypeError(f"Missing type in {link}")

    if not parts.identifier:
        raise MissingIdentifierError(f"Missing docId in {link}")

    return ShareLinkParts(
        scheme=parts.scheme,
        type=parts.type,
        identifier=parts.identifier,
        internal_id=HypermergeUrl(f"{INTERNAL_PREFIX}{parts.identifier}"),
    )
