"""Domain value objects for the adages community."""

from adages.domain.value.identifiers import (
    ChallengeId,
    CitationId,
    CollectionId,
    ContentId,
    SavedAdageId,
    UserId,
    VoteId,
)
from adages.domain.value.types import (
    CONTENT_TYPES,
    REPORTABLE_CONTENT_TYPES,
    ChallengeStatus,
    ContentType,
    UserRole,
    VoteTally,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "ContentId",
    "VoteId",
    "ChallengeId",
    "CitationId",
    "SavedAdageId",
    "CollectionId",
    # Types
    "CONTENT_TYPES",
    "REPORTABLE_CONTENT_TYPES",
    "ContentType",
    "VoteValue",
    "ChallengeStatus",
    "UserRole",
    "VoteTally",
]
