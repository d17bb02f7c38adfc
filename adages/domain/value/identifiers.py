"""Strongly typed identifiers for the adages domain entities.

All primary keys are UUIDs. NewType keeps a comment id from being passed
where a user id is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ContentId = NewType("ContentId", UUID)  # Any votable/reportable content item
VoteId = NewType("VoteId", UUID)
ChallengeId = NewType("ChallengeId", UUID)
CitationId = NewType("CitationId", UUID)
SavedAdageId = NewType("SavedAdageId", UUID)
CollectionId = NewType("CollectionId", UUID)
