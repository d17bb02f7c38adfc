"""In-memory content repository for testing."""

from typing import Sequence

from adages.domain.model.common import as_utc
from adages.domain.model.content import ContentItem, ContentSummary
from adages.domain.repository.content import ContentRepository
from adages.domain.value import ContentId, ContentType, UserId
from adages.persistence.repository.inmemory.store import InMemoryStore


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _live_by_author(
        self, content_type: ContentType, author_id: UserId
    ) -> list[ContentItem]:
        return [
            item
            for item in self.store.content[content_type].values()
            if item.author_id == author_id and item.deleted_at is None
        ]

    async def find_ids_by_author(
        self, content_type: ContentType, author_id: UserId
    ) -> list[ContentId]:
        """Find ids of the author's non-deleted items, newest first."""
        items = self._live_by_author(content_type, author_id)
        # Newest first, id ascending within equal timestamps
        items.sort(key=lambda item: str(item.id))
        items.sort(key=lambda item: as_utc(item.created_at), reverse=True)
        return [item.id for item in items]

    async def find_summaries(
        self, content_type: ContentType, ids: Sequence[ContentId]
    ) -> list[ContentSummary]:
        """Load summaries for the given items."""
        items = self.store.content[content_type]
        return [items[i].summarize() for i in ids if i in items]

    async def count_by_author(
        self, content_type: ContentType, author_id: UserId
    ) -> int:
        """Count the author's non-deleted items (hidden included)."""
        return len(self._live_by_author(content_type, author_id))

    async def save(self, item: ContentItem) -> ContentItem:
        """Save a content item."""
        self.store.content[item.content_type][item.id] = item
        return item
