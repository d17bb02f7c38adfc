"""In-memory user repository for testing."""

from typing import Optional

from adages.domain.model.user import User
from adages.domain.repository.user import UserRepository
from adages.domain.value import UserId
from adages.persistence.repository.inmemory.store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        user = self.store.users.get(user_id)
        if user and user.deleted_at and not include_deleted:
            return None
        return user

    async def save(self, user: User) -> User:
        """Save a user."""
        self.store.users[user.id] = user
        return user
