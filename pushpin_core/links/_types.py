"""Domain-specific types for document links."""

from dataclasses import dataclass
from typing import NewType

HypermergeUrl = NewType("HypermergeUrl", str)
"""Internal document identifier in the store's namespace: `hypermerge:/<bare-id>`."""

PushpinUrl = NewType("PushpinUrl", str)
"""Typed, checksummed share link: `pushpin://<type>/<bare-id>/<checksum-token>`."""


@dataclass(frozen=True, slots=True)
class EncodedParts:
    """Raw captures of a structurally valid share link, checksum token still encoded."""

    body: str
    scheme: str
    type: str
    identifier: str
    token: str


@dataclass(frozen=True, slots=True)
class ShareLinkParts:
    """Validated components of a parsed share link."""

    scheme: str
    type: str
    identifier: str
    internal_id: HypermergeUrl


__all__ = ["EncodedParts", "HypermergeUrl", "PushpinUrl", "ShareLinkParts"]
