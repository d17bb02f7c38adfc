"""Citation and library repository interfaces."""

from abc import ABC, abstractmethod

from adages.domain.model.library import Citation, Collection, SavedAdage
from adages.domain.value import UserId


class CitationRepository(ABC):
    """Repository for adage citations."""

    @abstractmethod
    async def count_by_submitter(self, user_id: UserId) -> int:
        """Count non-deleted citations the user submitted."""
        pass

    @abstractmethod
    async def save(self, citation: Citation) -> Citation:
        """Save a citation."""
        pass


class LibraryRepository(ABC):
    """Repository for a user's saved adages and collections."""

    @abstractmethod
    async def count_saved_adages(self, user_id: UserId) -> int:
        """Count the user's non-deleted saved adages."""
        pass

    @abstractmethod
    async def count_collections(self, user_id: UserId) -> int:
        """Count the user's non-deleted collections."""
        pass

    @abstractmethod
    async def save_saved_adage(self, saved: SavedAdage) -> SavedAdage:
        """Save a bookmarked adage."""
        pass

    @abstractmethod
    async def save_collection(self, collection: Collection) -> Collection:
        """Save a collection."""
        pass
