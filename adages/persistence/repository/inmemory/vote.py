"""In-memory vote repository for testing."""

from typing import Sequence

from adages.domain.model.vote import Vote
from adages.domain.repository.vote import VoteRepository
from adages.domain.value import ContentId, ContentType, VoteTally, VoteValue
from adages.persistence.repository.inmemory.store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> list[Vote]:
        """Find all votes on any of the given items."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for v in self.store.votes
            if v.target_type == target_type and v.target_id in wanted
        ]

    async def tally_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> dict[ContentId, VoteTally]:
        """Up/down counts per item that has votes."""
        counts: dict[ContentId, list[int]] = {}
        for vote in await self.find_by_targets(target_type, target_ids):
            up_down = counts.setdefault(vote.target_id, [0, 0])
            if vote.value == VoteValue.UP:
                up_down[0] += 1
            elif vote.value == VoteValue.DOWN:
                up_down[1] += 1
        return {
            target_id: VoteTally.of(up, down) for target_id, (up, down) in counts.items()
        }

    async def save(self, vote: Vote) -> Vote:
        """Save a vote."""
        self.store.votes.append(vote)
        return vote
