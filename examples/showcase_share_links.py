#!/usr/bin/env python3
"""Share link showcase. Runs standalone without external services.

Demonstrates:
  - Encoding and parsing share links
  - How tampered, malformed and foreign links are rejected
  - Registering content types
  - Creating documents in a LocalDocumentStore and opening them by link

Usage:
  python examples/showcase_share_links.py
"""

import asyncio
from pathlib import Path
from tempfile import TemporaryDirectory

from pushpin_core import (
    ContentType,
    HypermergeUrl,
    ShareLinkError,
    create_document,
    create_document_link,
    open_document_link,
    parse_document_link,
    register_content_type,
)
from pushpin_core.document_store.local import LocalDocumentStore
from pushpin_core.links import with_checksum

# ---------------------------------------------------------------------------
# 1. Codec
# ---------------------------------------------------------------------------


def demo_codec() -> None:
    print("\n=== Share Link Codec ===\n")
    link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
    print(f"Encoded: {link}")
    print(f"Parsed:  {parse_document_link(link)}")

    body, token = link.rsplit("/", 1)
    rejected = [
        "",
        "not-a-link",
        f"{body[:-1]}4/{token}",
        with_checksum("http://board/abc123"),
    ]
    for candidate in rejected:
        try:
            parse_document_link(candidate)
        except ShareLinkError as e:
            print(f"Rejected {candidate!r}: {type(e).__name__}: {e}")


# ---------------------------------------------------------------------------
# 2. Content types + document store
# ---------------------------------------------------------------------------


def _init_mindmap(title: str = "No Title", background_color: str = "white") -> dict:
    return {"title": title, "backgroundColor": background_color, "authorIds": [], "nodes": {}, "edges": {}}


async def demo_documents() -> None:
    print("\n=== Documents by Link ===\n")
    register_content_type(ContentType(type="mindmap", name="Mind Map", icon="sitemap", create=_init_mindmap))

    with TemporaryDirectory() as tmp:
        store = LocalDocumentStore(Path(tmp))
        link = await create_document("mindmap", store, title="Showcase")
        print(f"Created: {link}")

        opened = await open_document_link(link, store)
        print(f"Opened {opened.content_type.name} '{opened.handle.doc['title']}' from {opened.handle.internal_id}")
        print(f"Files: {sorted(p.name for p in Path(tmp).iterdir())}")


def main() -> None:
    demo_codec()
    asyncio.run(demo_documents())
    print("\nAll demos completed successfully.")


if __name__ == "__main__":
    main()
