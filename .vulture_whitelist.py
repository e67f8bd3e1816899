"""Vulture whitelist: methods called by frameworks, not direct code."""

# Pydantic validators, called by Pydantic, not our code
from pushpin_core.content_types.registry import ContentType

ContentType.validate_type

from pushpin_core.document_store._models import DocumentHandle

DocumentHandle.validate_internal_id

# Settings fields read from the environment
from pushpin_core.settings import Settings

Settings.model_config
