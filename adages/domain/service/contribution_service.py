"""Contribution domain service.

Finds what a user has authored and counts what they have contributed.
"""

import asyncio

import logfire

from adages.domain.model import AuthoredContent, ContributionCounts
from adages.domain.repository import (
    ChallengeRepository,
    CitationRepository,
    ContentRepository,
)
from adages.domain.value import CONTENT_TYPES, ContentType, UserId
from adages.util.fallback import best_effort

from .base import Service


class ContributionService(Service):
    """Domain service for a user's authored content and contributions."""

    def __init__(
        self,
        content_repository: ContentRepository,
        challenge_repository: ChallengeRepository,
        citation_repository: CitationRepository,
    ) -> None:
        """Initialize contribution service.

        Args:
            content_repository: Content repository (all categories)
            challenge_repository: Challenge repository
            citation_repository: Citation repository
        """
        self.content_repository = content_repository
        self.challenge_repository = challenge_repository
        self.citation_repository = citation_repository

    async def locate_authored_content(self, user_id: UserId) -> AuthoredContent:
        """Find the ids of the user's non-deleted content in every category.

        Categories are looked up concurrently. A category whose lookup
        fails is treated as empty.

        Args:
            user_id: Author ID

        Returns:
            Authored content ids, newest first per category
        """
        with logfire.span(
            "contribution_service.locate_authored_content", user_id=str(user_id)
        ):
            results = await asyncio.gather(
                *(
                    best_effort(
                        self.content_repository.find_ids_by_author(
                            content_type, user_id
                        ),
                        [],
                        label=f"{content_type.value}_ids",
                        user_id=str(user_id),
                    )
                    for content_type in CONTENT_TYPES
                )
            )
            authored = AuthoredContent(
                ids={
                    content_type: tuple(ids)
                    for content_type, ids in zip(CONTENT_TYPES, results)
                }
            )
            logfire.info(
                "Authored content located",
                user_id=str(user_id),
                **{ct.value: len(authored.for_type(ct)) for ct in CONTENT_TYPES},
            )
            return authored

    async def count_contributions(self, user_id: UserId) -> ContributionCounts:
        """Count the rows the user authored or submitted, per table.

        Each count is independent of the authored-content lookup. A
        failing count is reported as zero.

        Args:
            user_id: User ID

        Returns:
            Contribution counts
        """
        with logfire.span(
            "contribution_service.count_contributions", user_id=str(user_id)
        ):
            context = {"user_id": str(user_id)}
            citations, challenges, comments, blog_posts, adages = await asyncio.gather(
                best_effort(
                    self.citation_repository.count_by_submitter(user_id),
                    0,
                    label="citation_count",
                    **context,
                ),
                best_effort(
                    self.challenge_repository.count_by_challenger(user_id),
                    0,
                    label="challenge_count",
                    **context,
                ),
                self._count(ContentType.COMMENT, user_id),
                self._count(ContentType.BLOG, user_id),
                self._count(ContentType.ADAGE, user_id),
            )
            return ContributionCounts(
                citations=citations,
                challenges=challenges,
                comments=comments,
                blog_posts=blog_posts,
                adages=adages,
            )

    async def _count(self, content_type: ContentType, user_id: UserId) -> int:
        return await best_effort(
            self.content_repository.count_by_author(content_type, user_id),
            0,
            label=f"{content_type.value}_count",
            user_id=str(user_id),
        )
