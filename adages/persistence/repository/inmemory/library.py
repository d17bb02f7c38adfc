"""In-memory citation and library repositories for testing."""

from adages.domain.model.library import Citation, Collection, SavedAdage
from adages.domain.repository.library import CitationRepository, LibraryRepository
from adages.domain.value import UserId
from adages.persistence.repository.inmemory.store import InMemoryStore


class InMemoryCitationRepository(CitationRepository):
    """In-memory implementation of CitationRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def count_by_submitter(self, user_id: UserId) -> int:
        return sum(
            1
            for c in self.store.citations
            if c.submitted_by == user_id and c.deleted_at is None
        )

    async def save(self, citation: Citation) -> Citation:
        self.store.citations.append(citation)
        return citation


class InMemoryLibraryRepository(LibraryRepository):
    """In-memory implementation of LibraryRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def count_saved_adages(self, user_id: UserId) -> int:
        return sum(
            1
            for s in self.store.saved_adages
            if s.user_id == user_id and s.deleted_at is None
        )

    async def count_collections(self, user_id: UserId) -> int:
        return sum(
            1
            for c in self.store.collections
            if c.user_id == user_id and c.deleted_at is None
        )

    async def save_saved_adage(self, saved: SavedAdage) -> SavedAdage:
        self.store.saved_adages.append(saved)
        return saved

    async def save_collection(self, collection: Collection) -> Collection:
        self.store.collections.append(collection)
        return collection
