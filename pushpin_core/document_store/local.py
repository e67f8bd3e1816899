"""Local filesystem document store.

Layout:
    {base_path}/{bare_id}.json  <- {"internal_id": ..., "doc": {...}}

Bare identifiers are limited to letters, digits and underscore, so file names
never escape base_path.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from pushpin_core.document_store._models import DocumentHandle
from pushpin_core.exceptions import DocumentStoreError
from pushpin_core.links import INTERNAL_PREFIX, HypermergeUrl, is_hypermerge_url
from pushpin_core.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)


class LocalDocumentStore:
    """Filesystem-backed document store for local development and the CLI.

    Writes go to a temporary file first and are renamed into place, so a reader
    never sees a partially written document.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        self._base_path = base_path or Path.cwd()

    @property
    def base_path(self) -> Path:
        """Root directory for all stored documents."""
        return self._base_path

    async def resolve(self, internal_id: HypermergeUrl) -> DocumentHandle | None:
        """Read the document's JSON file. Returns None when the file does not exist."""
        return await asyncio.to_thread(self._resolve_sync, internal_id)

    async def save(self, handle: DocumentHandle) -> None:
        """Write the document's JSON file atomically."""
        await asyncio.to_thread(self._save_sync, handle)

    async def exists(self, internal_id: HypermergeUrl) -> bool:
        """Check for the document's JSON file without reading it."""
        return await asyncio.to_thread(self._exists_sync, internal_id)

    # --- Sync implementation (called via asyncio.to_thread) ---

    def _document_path(self, internal_id: str) -> Path | None:
        if not is_hypermerge_url(internal_id):
            return None
        return self._base_path / f"{internal_id[len(INTERNAL_PREFIX) :]}.json"

    def _resolve_sync(self, internal_id: HypermergeUrl) -> DocumentHandle | None:
        path = self._document_path(internal_id)
        if path is None or not path.exists():
            return None
        try:
            return DocumentHandle.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise DocumentStoreError(f"Corrupt document file {path}: {e}") from e

    def _save_sync(self, handle: DocumentHandle) -> None:
        self._base_path.mkdir(parents=True, exist_ok=True)
        path = self._base_path / f"{handle.bare_id}.json"
        # Unique temp file per save so concurrent saves of one id never share it
        tmp = tempfile.NamedTemporaryFile("w", dir=self._base_path, prefix=f"{handle.bare_id}.", suffix=".json.tmp", delete=False, encoding="utf-8")
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                tmp.write(json.dumps(handle.model_dump(mode="json"), indent=2))
            os.replace(tmp_path, path)
        except OSError as e:
            raise DocumentStoreError(f"Failed to save {handle.internal_id} to {path}: {e}") from e
        finally:
            tmp_path.unlink(missing_ok=True)
        logger.debug(f"Saved {handle.internal_id} to {path}")

    def _exists_sync(self, internal_id: HypermergeUrl) -> bool:
        path = self._document_path(internal_id)
        return path is not None and path.exists()
