"""PostgreSQL implementation of Vote repository."""

from typing import Sequence

from sqlalchemy import func, select

from adages.domain.model import Vote
from adages.domain.repository import VoteRepository
from adages.domain.value import ContentId, ContentType, VoteTally, VoteValue
from adages.persistence.mappers import row_to_vote, vote_to_dict
from adages.persistence.repository.base import PostgresRepository
from adages.persistence.tables import votes_table

VALID_VALUES = [int(v) for v in VoteValue]


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    async def find_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> list[Vote]:
        """Find all votes on any of the given items (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            votes_table.c.target_type == target_type.value,
            votes_table.c.target_id.in_(target_ids),
            votes_table.c.value.in_(VALID_VALUES),
        )
        return [row_to_vote(row) for row in await self._fetch_all(stmt)]

    async def tally_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> dict[ContentId, VoteTally]:
        """Up/down counts per item in a single GROUP BY query."""
        if not target_ids:
            return {}

        stmt = (
            select(
                votes_table.c.target_id,
                func.count()
                .filter(votes_table.c.value == int(VoteValue.UP))
                .label("upvotes"),
                func.count()
                .filter(votes_table.c.value == int(VoteValue.DOWN))
                .label("downvotes"),
            )
            .where(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
            .group_by(votes_table.c.target_id)
        )
        rows = await self._fetch_all(stmt)
        return {
            ContentId(row["target_id"]): VoteTally.of(row["upvotes"], row["downvotes"])
            for row in rows
        }

    async def save(self, vote: Vote) -> Vote:
        """Save a vote."""
        await self._insert(votes_table, vote_to_dict(vote))
        return vote
