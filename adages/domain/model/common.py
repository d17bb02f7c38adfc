"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def as_utc(value: datetime) -> datetime:
    """Treat a naive timestamp as UTC so it compares with aware ones."""
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,
    )
