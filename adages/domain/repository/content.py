"""Content repository interface.

One repository covers all five content categories; the category is passed
explicitly so implementations can route to the right table.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from adages.domain.model.content import ContentItem, ContentSummary
from adages.domain.value import ContentId, ContentType, UserId


class ContentRepository(ABC):
    """Repository for votable content items."""

    @abstractmethod
    async def find_ids_by_author(
        self, content_type: ContentType, author_id: UserId
    ) -> list[ContentId]:
        """Find ids of the author's non-deleted items in one category.

        Ordered newest first, with the id as tie-break so the order is
        stable across calls.

        Args:
            content_type: Category to search
            author_id: The author's ID

        Returns:
            Ordered list of content ids
        """
        pass

    @abstractmethod
    async def find_summaries(
        self, content_type: ContentType, ids: Sequence[ContentId]
    ) -> list[ContentSummary]:
        """Load summaries for the given items.

        Unknown ids are ignored. Deleted and hidden items are returned
        as-is; callers decide what to filter.

        Args:
            content_type: Category of the ids
            ids: Content ids to load

        Returns:
            Summaries in no particular order
        """
        pass

    @abstractmethod
    async def count_by_author(
        self, content_type: ContentType, author_id: UserId
    ) -> int:
        """Count the author's non-deleted items in one category.

        Hidden items are still counted.

        Args:
            content_type: Category to count
            author_id: The author's ID

        Returns:
            Number of items
        """
        pass

    @abstractmethod
    async def save(self, item: ContentItem) -> ContentItem:
        """Save a content item of any category.

        Args:
            item: The item to save

        Returns:
            The saved item
        """
        pass
