"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class VersionedModel(DomainModel):
    """Domain model stored with an optimistic-concurrency version.

    ``version`` is the version the record had when it was read. Stores only
    accept a write of the record while the stored version still matches, and
    bump it by one on success.
    """

    version: int = Field(default=0, ge=0)
