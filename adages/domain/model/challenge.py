"""Reader challenge entity.

A challenge is a reader's report against a comment, blog post or adage.
Moderators move it from ``pending`` to a final status.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from adages.domain.model.common import DomainModel
from adages.domain.value import (
    ChallengeId,
    ChallengeStatus,
    ContentId,
    ContentType,
    UserId,
)


class Challenge(DomainModel):
    """Moderation flag against a content item."""

    id: ChallengeId
    challenger_id: UserId
    target_type: ContentType
    target_id: ContentId
    status: ChallengeStatus = ChallengeStatus.PENDING
    reason: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @field_validator("target_type")
    @classmethod
    def validate_reportable(cls, v: ContentType) -> ContentType:
        """Only comments, blog posts and adages can be challenged."""
        if not v.reportable:
            raise ValueError(f"{v.value} content cannot be challenged")
        return v

    @property
    def is_accepted(self) -> bool:
        return self.status == ChallengeStatus.ACCEPTED
