"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from adages.domain.model.user import User
from adages.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            include_deleted: Also return soft-deleted users

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
