"""PostgreSQL implementations of Citation and Library repositories."""

from sqlalchemy import Table, func, select

from adages.domain.model import Citation, Collection, SavedAdage
from adages.domain.repository import CitationRepository, LibraryRepository
from adages.domain.value import UserId
from adages.persistence.mappers import model_to_dict
from adages.persistence.repository.base import PostgresRepository
from adages.persistence.tables import (
    citations_table,
    collections_table,
    saved_adages_table,
)


def _count_live(table: Table, owner_column: str, user_id: UserId):
    return (
        select(func.count())
        .select_from(table)
        .where(table.c[owner_column] == user_id, table.c.deleted_at.is_(None))
    )


class PostgresCitationRepository(PostgresRepository, CitationRepository):
    """PostgreSQL implementation of CitationRepository."""

    async def count_by_submitter(self, user_id: UserId) -> int:
        """Count non-deleted citations the user submitted."""
        return await self._count(_count_live(citations_table, "submitted_by", user_id))

    async def save(self, citation: Citation) -> Citation:
        """Save a citation."""
        await self._insert(citations_table, model_to_dict(citation))
        return citation


class PostgresLibraryRepository(PostgresRepository, LibraryRepository):
    """PostgreSQL implementation of LibraryRepository."""

    async def count_saved_adages(self, user_id: UserId) -> int:
        """Count the user's non-deleted saved adages."""
        return await self._count(_count_live(saved_adages_table, "user_id", user_id))

    async def count_collections(self, user_id: UserId) -> int:
        """Count the user's non-deleted collections."""
        return await self._count(_count_live(collections_table, "user_id", user_id))

    async def save_saved_adage(self, saved: SavedAdage) -> SavedAdage:
        """Save a bookmarked adage."""
        await self._insert(saved_adages_table, model_to_dict(saved))
        return saved

    async def save_collection(self, collection: Collection) -> Collection:
        """Save a collection."""
        await self._insert(collections_table, model_to_dict(collection))
        return collection
