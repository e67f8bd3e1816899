"""Share link codec for Pushpin documents.

Encodes internal document identifiers plus a content type tag into typed,
checksummed share links, and parses share links back into their parts.
"""

from ._checksum import crc16, decode_token, encode_token
from ._types import EncodedParts, HypermergeUrl, PushpinUrl, ShareLinkParts
from .share_link import (
    INTERNAL_PREFIX,
    SHARE_SCHEME,
    create_document_link,
    is_hypermerge_url,
    is_pushpin_url,
    is_valid_checksum,
    new_hypermerge_url,
    parse_document_link,
    split_link,
    with_checksum,
)

__all__ = [
    "INTERNAL_PREFIX",
    "SHARE_SCHEME",
    "EncodedParts",
    "HypermergeUrl",
    "PushpinUrl",
    "ShareLinkParts",
    "crc16",
    "create_document_link",
    "decode_token",
    "encode_token",
    "is_hypermerge_url",
    "is_pushpin_url",
    "is_valid_checksum",
    "new_hypermerge_url",
    "parse_document_link",
    "split_link",
    "with_checksum",
]
