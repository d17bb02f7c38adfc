"""Vote entity.

Votes are +1/-1 on any content item. One vote per user per item is
expected but not enforced here.
"""

from datetime import datetime

from pydantic import Field

from adages.domain.model.common import DomainModel
from adages.domain.value import ContentId, ContentType, UserId, VoteId, VoteValue


class Vote(DomainModel):
    """Vote entity with a polymorphic target reference."""

    id: VoteId
    user_id: UserId
    target_type: ContentType
    target_id: ContentId
    value: VoteValue
    created_at: datetime = Field(default_factory=datetime.now)
