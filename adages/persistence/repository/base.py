"""Shared plumbing for PostgreSQL repositories."""

from typing import Any, Sequence

from sqlalchemy import Table
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.sql.base import Executable
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from adages.persistence.database import get_session


class PostgresRepository:
    """Base for repositories backed by a session factory.

    Every call opens its own short-lived session, so one repository can
    serve several concurrent queries within a request.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def _fetch_all(self, stmt: Executable) -> list[dict[str, Any]]:
        async with get_session(self.session_factory) as session:
            result = await session.execute(stmt)
            return [row._asdict() for row in result.fetchall()]

    async def _fetch_one(self, stmt: Executable) -> dict[str, Any] | None:
        async with get_session(self.session_factory) as session:
            result = await session.execute(stmt)
            row = result.fetchone()
            return row._asdict() if row else None

    async def _scalars(self, stmt: Executable) -> Sequence[Any]:
        async with get_session(self.session_factory) as session:
            result = await session.execute(stmt)
            return result.scalars().all()

    async def _count(self, stmt: Executable) -> int:
        async with get_session(self.session_factory) as session:
            result = await session.execute(stmt)
            return result.scalar_one() or 0

    async def _insert(self, table: Table, values: dict[str, Any]) -> None:
        """Insert a row, leaving an existing row with the same id untouched."""
        stmt = insert(table).values(**values).on_conflict_do_nothing(
            index_elements=[table.c.id]
        )
        async with get_session(self.session_factory) as session:
            await session.execute(stmt)
            await session.commit()
