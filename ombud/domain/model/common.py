"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def normalize_tags(tags: object) -> tuple[str, ...]:
    """Lowercase and trim tags, dropping empty ones."""
    if tags is None:
        return ()
    if isinstance(tags, str):
        tags = [tags]
    return tuple(
        tag.strip().lower() for tag in tags if isinstance(tag, str) and tag.strip()
    )


def utcnow() -> datetime:
    """Timezone-aware current time, matching TIMESTAMPTZ columns."""
    return datetime.now(timezone.utc)
