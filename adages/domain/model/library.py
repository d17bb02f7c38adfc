"""Citation and personal library entities.

These only matter to the statistics code as things a user has contributed
or collected, so they carry few fields.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from adages.domain.model.common import DomainModel
from adages.domain.value import (
    CitationId,
    CollectionId,
    ContentId,
    SavedAdageId,
    UserId,
)


class Citation(DomainModel):
    """Citation submitted for an adage."""

    id: CitationId
    submitted_by: UserId
    adage_id: ContentId
    source: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None


class SavedAdage(DomainModel):
    """Adage bookmarked by a user."""

    id: SavedAdageId
    user_id: UserId
    adage_id: ContentId
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None


class Collection(DomainModel):
    """Named list of adages curated by a user."""

    id: CollectionId
    user_id: UserId
    name: str = Field(min_length=1, max_length=200)
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
