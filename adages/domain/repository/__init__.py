"""Repository interfaces for the adages domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from adages.domain.repository.challenge import ChallengeRepository
from adages.domain.repository.content import ContentRepository
from adages.domain.repository.library import CitationRepository, LibraryRepository
from adages.domain.repository.user import UserRepository
from adages.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "ContentRepository",
    "VoteRepository",
    "ChallengeRepository",
    "CitationRepository",
    "LibraryRepository",
]
