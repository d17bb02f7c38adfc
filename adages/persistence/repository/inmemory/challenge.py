"""In-memory challenge repository for testing."""

from typing import Sequence

from adages.domain.model.challenge import Challenge
from adages.domain.repository.challenge import ChallengeRepository
from adages.domain.value import ContentId, ContentType, UserId
from adages.persistence.repository.inmemory.store import InMemoryStore


class InMemoryChallengeRepository(ChallengeRepository):
    """In-memory implementation of ChallengeRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> list[Challenge]:
        """Find non-deleted challenges against any of the given items."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            c
            for c in self.store.challenges
            if c.target_type == target_type
            and c.target_id in wanted
            and c.deleted_at is None
        ]

    async def count_by_challenger(self, challenger_id: UserId) -> int:
        """Count non-deleted challenges the user has filed."""
        return sum(
            1
            for c in self.store.challenges
            if c.challenger_id == challenger_id and c.deleted_at is None
        )

    async def save(self, challenge: Challenge) -> Challenge:
        """Save a challenge."""
        self.store.challenges.append(challenge)
        return challenge
