"""Commendation domain service.

Assembles a user's commendation statistics: reports received, votes
received, contribution counts and their most popular content.
"""

import asyncio

import logfire

from adages.config import CommendationSettings
from adages.domain.model import (
    AuthoredContent,
    CommendationStats,
    ContentSummary,
    ReportCounts,
    ScoredContent,
)
from adages.domain.repository import ContentRepository
from adages.domain.value import CONTENT_TYPES, ContentType, UserId, VoteTally
from adages.util.fallback import best_effort

from .base import Service
from .contribution_service import ContributionService
from .engagement_service import EngagementService
from .scoring import combine_tallies, rank_popular, reduce_votes


class CommendationService(Service):
    """Domain service composing the commendation statistics."""

    def __init__(
        self,
        contribution_service: ContributionService,
        engagement_service: EngagementService,
        content_repository: ContentRepository,
        settings: CommendationSettings,
    ) -> None:
        """Initialize commendation service.

        Args:
            contribution_service: Contribution domain service
            engagement_service: Engagement domain service
            content_repository: Content repository (for item summaries)
            settings: Sampling and ranking configuration
        """
        self.contribution_service = contribution_service
        self.engagement_service = engagement_service
        self.content_repository = content_repository
        self.settings = settings

    def sample_limits(self) -> dict[ContentType, int]:
        """How many recent items per category are scored for popularity."""
        return {
            content_type: (
                self.settings.comment_sample
                if content_type == ContentType.COMMENT
                else self.settings.content_sample
            )
            for content_type in CONTENT_TYPES
        }

    async def _load_summaries(self, sample: AuthoredContent) -> list[ContentSummary]:
        wanted = [ct for ct in CONTENT_TYPES if sample.for_type(ct)]
        results = await asyncio.gather(
            *(
                best_effort(
                    self.content_repository.find_summaries(ct, sample.for_type(ct)),
                    [],
                    label="summaries",
                    content_type=ct.value,
                )
                for ct in wanted
            )
        )
        return [summary for summaries in results for summary in summaries]

    async def get_commendation_stats(self, user_id: UserId) -> CommendationStats:
        """Compute the user's commendation statistics.

        Steps:
        1. Locate the user's non-deleted content in every category
        2. Concurrently fetch reports, votes, per-item tallies for the
           most recent items, their summaries and the contribution counts
        3. Reduce votes and rank the scored items

        Args:
            user_id: User ID

        Returns:
            Commendation statistics (all zeros for a user with no content)
        """
        with logfire.span(
            "commendation_service.get_commendation_stats", user_id=str(user_id)
        ):
            authored = await self.contribution_service.locate_authored_content(user_id)
            if authored.is_empty:
                # Nothing to report on or vote for; only counts remain
                contributions = await self.contribution_service.count_contributions(
                    user_id
                )
                return CommendationStats(contributions=contributions)

            sample = authored.sample(self.sample_limits())

            reports, votes, tallies, summaries, contributions = await asyncio.gather(
                self.engagement_service.fetch_reports(authored),
                self.engagement_service.fetch_votes(authored),
                self.engagement_service.fetch_item_tallies(sample),
                self._load_summaries(sample),
                self.contribution_service.count_contributions(user_id),
            )

            report_counts = ReportCounts.from_challenges(
                [challenge for found in reports.values() for challenge in found]
            )
            vote_totals = combine_tallies(reduce_votes(v) for v in votes.values())

            scored = [
                ScoredContent(
                    summary=summary,
                    tally=tallies.get((summary.content_type, summary.id), VoteTally()),
                )
                for summary in summaries
            ]
            popular = rank_popular(
                scored,
                limit=self.settings.popular_limit,
                include_unvoted=self.settings.include_unvoted,
            )

            logfire.info(
                "Commendation stats assembled",
                user_id=str(user_id),
                reports_received=report_counts.received,
                net_votes=vote_totals.net,
                scored_items=len(scored),
                popular_posts=len(popular),
            )

            return CommendationStats(
                reports=report_counts,
                votes=vote_totals,
                contributions=contributions,
                popular_posts=popular,
            )
