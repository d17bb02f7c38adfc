"""Engagement domain service.

Fetches the reports and votes a user's content has received. Every query
is batched per category and categories are fetched concurrently.
"""

import asyncio
from typing import Awaitable, Callable, Sequence, TypeVar

import logfire

from adages.domain.model import AuthoredContent, Challenge, Vote
from adages.domain.repository import ChallengeRepository, VoteRepository
from adages.domain.value import (
    CONTENT_TYPES,
    REPORTABLE_CONTENT_TYPES,
    ContentId,
    ContentType,
    VoteTally,
)
from adages.util.fallback import best_effort

from .base import Service

T = TypeVar("T")

ItemKey = tuple[ContentType, ContentId]


class EngagementService(Service):
    """Domain service for reports and votes on authored content."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        challenge_repository: ChallengeRepository,
    ) -> None:
        """Initialize engagement service.

        Args:
            vote_repository: Vote repository
            challenge_repository: Challenge repository
        """
        self.vote_repository = vote_repository
        self.challenge_repository = challenge_repository

    async def _per_category(
        self,
        authored: AuthoredContent,
        content_types: Sequence[ContentType],
        fetch: Callable[[ContentType, Sequence[ContentId]], Awaitable[T]],
        default: T,
        label: str,
    ) -> dict[ContentType, T]:
        """Run ``fetch`` for every category that has ids, concurrently.

        Categories with no ids are skipped and get ``default``, as do
        categories whose fetch fails.
        """
        wanted = [ct for ct in content_types if authored.for_type(ct)]
        results = await asyncio.gather(
            *(
                best_effort(
                    fetch(ct, authored.for_type(ct)),
                    default,
                    label=label,
                    content_type=ct.value,
                )
                for ct in wanted
            )
        )
        fetched = dict(zip(wanted, results))
        return {ct: fetched.get(ct, default) for ct in content_types}

    async def fetch_reports(
        self, authored: AuthoredContent
    ) -> dict[ContentType, list[Challenge]]:
        """Challenges against the user's comments, blog posts and adages.

        Args:
            authored: The user's content ids

        Returns:
            Non-deleted challenges, keyed by the category they target
        """
        with logfire.span("engagement_service.fetch_reports"):
            reportable = [ct for ct in CONTENT_TYPES if ct in REPORTABLE_CONTENT_TYPES]
            return await self._per_category(
                authored,
                reportable,
                self.challenge_repository.find_by_targets,
                [],
                label="reports",
            )

    async def fetch_votes(
        self, authored: AuthoredContent
    ) -> dict[ContentType, list[Vote]]:
        """All votes on the user's content, one batched query per category.

        Args:
            authored: The user's content ids

        Returns:
            Votes keyed by the category they target
        """
        with logfire.span("engagement_service.fetch_votes"):
            return await self._per_category(
                authored,
                CONTENT_TYPES,
                self.vote_repository.find_by_targets,
                [],
                label="votes",
            )

    async def fetch_item_tallies(
        self, authored: AuthoredContent
    ) -> dict[ItemKey, VoteTally]:
        """Per-item vote tallies from one grouped query per category.

        Keys carry the category so equal ids in different tables never
        share a tally.

        Args:
            authored: Content ids to score (usually a sample)

        Returns:
            Tallies keyed by (category, id); unvoted items are absent
        """
        with logfire.span("engagement_service.fetch_item_tallies"):
            by_category = await self._per_category(
                authored,
                CONTENT_TYPES,
                self.vote_repository.tally_by_targets,
                {},
                label="item_tallies",
            )
            return {
                (content_type, content_id): tally
                for content_type, tallies in by_category.items()
                for content_id, tally in tallies.items()
            }
