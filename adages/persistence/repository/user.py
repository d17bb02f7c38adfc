"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select

from adages.domain.model import User
from adages.domain.repository import UserRepository
from adages.domain.value import UserId
from adages.persistence.mappers import row_to_user, user_to_dict
from adages.persistence.repository.base import PostgresRepository
from adages.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        if not include_deleted:
            stmt = stmt.where(users_table.c.deleted_at.is_(None))
        row = await self._fetch_one(stmt)
        return row_to_user(row) if row else None

    async def save(self, user: User) -> User:
        """Save a user (insert if missing)."""
        await self._insert(users_table, user_to_dict(user))
        return user
