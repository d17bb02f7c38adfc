"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from adages.domain.model.vote import Vote
from adages.domain.value import ContentId, ContentType, VoteTally


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> list[Vote]:
        """Find all votes on any of the given items (batch query).

        Args:
            target_type: Category of the items
            target_ids: Item IDs

        Returns:
            Votes on the items
        """
        pass

    @abstractmethod
    async def tally_by_targets(
        self, target_type: ContentType, target_ids: Sequence[ContentId]
    ) -> dict[ContentId, VoteTally]:
        """Up/down counts per item, computed in one grouped query.

        Items without votes are absent from the result.

        Args:
            target_type: Category of the items
            target_ids: Item IDs

        Returns:
            Mapping of item ID to its tally
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote
        """
        pass
