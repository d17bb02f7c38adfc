"""PostgreSQL repository implementations."""

from adages.persistence.repository.challenge import PostgresChallengeRepository
from adages.persistence.repository.content import PostgresContentRepository
from adages.persistence.repository.library import (
    PostgresCitationRepository,
    PostgresLibraryRepository,
)
from adages.persistence.repository.user import PostgresUserRepository
from adages.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresContentRepository",
    "PostgresVoteRepository",
    "PostgresChallengeRepository",
    "PostgresCitationRepository",
    "PostgresLibraryRepository",
]
