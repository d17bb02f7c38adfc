"""In-memory repository implementations for testing and local development."""

from .challenge import InMemoryChallengeRepository
from .content import InMemoryContentRepository
from .library import InMemoryCitationRepository, InMemoryLibraryRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryStore",
    "InMemoryChallengeRepository",
    "InMemoryCitationRepository",
    "InMemoryContentRepository",
    "InMemoryLibraryRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
