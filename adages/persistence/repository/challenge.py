"""PostgreSQL implementation of Challenge repository."""

from typing import Sequence

from sqlalchemy import func, select

from adages.domain.model import Challenge
from adages.domain.repository import ChallengeRepository
from adages.domain.value import ContentId, ContentType, UserId
from adages.persistence.mappers import challenge_to_dict, row_to_challenge
from adages.persistence.repository.base import PostgresRepository
from adages.persistence.tables import reader_challenges_table


class PostgresChallengeRepository(PostgresRepository, ChallengeRepository):
    """PostgreSQL implementation of ChallengeRepository."""

    async def find_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> list[Challenge]:
        """Find non-deleted challenges against any of the given items."""
        if not target_ids:
            return []

        stmt = select(reader_challenges_table).where(
            reader_challenges_table.c.target_type == target_type.value,
            reader_challenges_table.c.target_id.in_(target_ids),
            reader_challenges_table.c.deleted_at.is_(None),
        )
        return [row_to_challenge(row) for row in await self._fetch_all(stmt)]

    async def count_by_challenger(self, challenger_id: UserId) -> int:
        """Count non-deleted challenges the user has filed."""
        stmt = (
            select(func.count())
            .select_from(reader_challenges_table)
            .where(
                reader_challenges_table.c.challenger_id == challenger_id,
                reader_challenges_table.c.deleted_at.is_(None),
            )
        )
        return await self._count(stmt)

    async def save(self, challenge: Challenge) -> Challenge:
        """Save a challenge."""
        await self._insert(reader_challenges_table, challenge_to_dict(challenge))
        return challenge
