"""User domain service."""

import asyncio

import logfire

from adages.domain.error import NotFoundError
from adages.domain.model import ActivityStats, User
from adages.domain.repository import (
    ContentRepository,
    LibraryRepository,
    UserRepository,
)
from adages.domain.value import ContentType, UserId
from adages.util.fallback import best_effort

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        content_repository: ContentRepository,
        library_repository: LibraryRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            content_repository: Content repository
            library_repository: Saved adages and collections repository
        """
        self.user_repository = user_repository
        self.content_repository = content_repository
        self.library_repository = library_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a non-deleted user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If the user does not exist or was deleted
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def get_activity_stats(self, user_id: UserId) -> ActivityStats:
        """Saved adage, collection and comment counts for the profile header.

        A failing count is reported as zero.

        Args:
            user_id: User ID

        Returns:
            Activity counts
        """
        with logfire.span("user_service.get_activity_stats", user_id=str(user_id)):
            context = {"user_id": str(user_id)}
            saved, collections, comments = await asyncio.gather(
                best_effort(
                    self.library_repository.count_saved_adages(user_id),
                    0,
                    label="saved_adage_count",
                    **context,
                ),
                best_effort(
                    self.library_repository.count_collections(user_id),
                    0,
                    label="collection_count",
                    **context,
                ),
                best_effort(
                    self.content_repository.count_by_author(
                        ContentType.COMMENT, user_id
                    ),
                    0,
                    label="comment_count",
                    **context,
                ),
            )
            return ActivityStats(
                saved_adages=saved, collections=collections, comments=comments
            )
