"""Challenge repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from adages.domain.model.challenge import Challenge
from adages.domain.value import ContentId, ContentType, UserId


class ChallengeRepository(ABC):
    """Repository for reader challenges (content reports)."""

    @abstractmethod
    async def find_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> list[Challenge]:
        """Find non-deleted challenges against any of the given items.

        Args:
            target_type: Category of the items
            target_ids: Item IDs

        Returns:
            Challenges against the items
        """
        pass

    @abstractmethod
    async def count_by_challenger(self, challenger_id: UserId) -> int:
        """Count non-deleted challenges the user has filed.

        Args:
            challenger_id: The challenger's ID

        Returns:
            Number of challenges
        """
        pass

    @abstractmethod
    async def save(self, challenge: Challenge) -> Challenge:
        """Save a challenge.

        Args:
            challenge: The challenge to save

        Returns:
            The saved challenge
        """
        pass
