"""Common test fixtures for Pushpin Core."""

import pytest

from pushpin_core.content_types import reset_content_types
from pushpin_core.document_store import set_document_store


@pytest.fixture(autouse=True)
def clean_registries():
    """Reset process-global registries so tests don't leak registrations."""
    reset_content_types()
    set_document_store(None)
    yield
    reset_content_types()
    set_document_store(None)
