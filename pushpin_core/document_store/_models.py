"""Document handle returned by store lookups."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pushpin_core.exceptions import InvalidInternalIdentifierError
from pushpin_core.links import INTERNAL_PREFIX, HypermergeUrl, is_hypermerge_url

__all__ = ["DocumentHandle"]


class DocumentHandle(BaseModel):
    """A stored document and the internal identifier it lives under.

    The document body is an opaque JSON-compatible mapping owned by whichever
    content type created it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    internal_id: HypermergeUrl
    doc: dict[str, Any] = Field(default_factory=dict)

    @field_validator("internal_id")
    @classmethod
    def validate_internal_id(cls, v: str) -> str:
        if not is_hypermerge_url(v):
            raise InvalidInternalIdentifierError(f"expecting a hypermerge URL as input, got {v!r}")
        return v

    @property
    def bare_id(self) -> str:
        """Identifier with the internal scheme prefix stripped."""
        return self.internal_id[len(INTERNAL_PREFIX) :]
