"""PostgreSQL implementation of Content repository."""

from typing import Sequence

from sqlalchemy import func, select

from adages.domain.model import ContentItem, ContentSummary
from adages.domain.repository import ContentRepository
from adages.domain.value import ContentId, ContentType, UserId
from adages.persistence.mappers import content_to_dict, row_to_summary
from adages.persistence.tables import CONTENT_TABLES
from adages.persistence.repository.base import PostgresRepository

# Columns loaded into ContentSummary when the category's table has them
OPTIONAL_SUMMARY_COLUMNS = ("hidden_at", "slug", "thread_id", "target_type", "target_id")


class PostgresContentRepository(PostgresRepository, ContentRepository):
    """PostgreSQL implementation of ContentRepository.

    Routes each call to the category's table through ``CONTENT_TABLES``.
    """

    async def find_ids_by_author(
        self, content_type: ContentType, author_id: UserId
    ) -> list[ContentId]:
        """Find ids of the author's non-deleted items in one category."""
        content_table = CONTENT_TABLES[content_type]
        table = content_table.table
        stmt = (
            select(table.c.id)
            .where(content_table.author == author_id, table.c.deleted_at.is_(None))
            .order_by(table.c.created_at.desc(), table.c.id)
        )
        return [ContentId(row_id) for row_id in await self._scalars(stmt)]

    async def find_summaries(
        self, content_type: ContentType, ids: Sequence[ContentId]
    ) -> list[ContentSummary]:
        """Load summaries for the given items."""
        if not ids:
            return []

        content_table = CONTENT_TABLES[content_type]
        table = content_table.table
        columns = [
            table.c.id,
            content_table.author.label("author_id"),
            content_table.text.label("text"),
            table.c.created_at,
            table.c.deleted_at,
        ]
        columns.extend(
            table.c[name] for name in OPTIONAL_SUMMARY_COLUMNS if name in table.c
        )

        stmt = select(*columns).where(table.c.id.in_(ids))
        rows = await self._fetch_all(stmt)
        return [row_to_summary(content_type, row) for row in rows]

    async def count_by_author(
        self, content_type: ContentType, author_id: UserId
    ) -> int:
        """Count the author's non-deleted items in one category."""
        content_table = CONTENT_TABLES[content_type]
        table = content_table.table
        stmt = (
            select(func.count())
            .select_from(table)
            .where(content_table.author == author_id, table.c.deleted_at.is_(None))
        )
        return await self._count(stmt)

    async def save(self, item: ContentItem) -> ContentItem:
        """Save a content item into its category's table."""
        table = CONTENT_TABLES[item.content_type].table
        await self._insert(table, content_to_dict(item))
        return item
