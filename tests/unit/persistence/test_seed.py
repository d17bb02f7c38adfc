"""Unit tests for the demo dataset."""

import pytest

from adages.config import CommendationSettings
from adages.domain.service import (
    CommendationService,
    ContributionService,
    EngagementService,
)
from adages.domain.value import ContentType
from adages.persistence.repository.inmemory import (
    InMemoryChallengeRepository,
    InMemoryCitationRepository,
    InMemoryContentRepository,
    InMemoryLibraryRepository,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from adages.persistence.seed import (
    DEMO_USER_ID,
    build_demo_dataset,
    seed_repositories,
)


async def seeded_store() -> InMemoryStore:
    store = InMemoryStore()
    await seed_repositories(
        build_demo_dataset(),
        InMemoryUserRepository(store),
        InMemoryContentRepository(store),
        InMemoryVoteRepository(store),
        InMemoryChallengeRepository(store),
        InMemoryCitationRepository(store),
        InMemoryLibraryRepository(store),
    )
    return store


class TestDemoDataset:
    """Tests for build_demo_dataset."""

    def test_ids_are_stable(self):
        """Two builds should produce identical rows."""
        first = build_demo_dataset()
        second = build_demo_dataset()

        assert [i.id for i in first.content] == [i.id for i in second.content]
        assert [v.id for v in first.votes] == [v.id for v in second.votes]

    def test_every_vote_targets_seeded_content(self):
        dataset = build_demo_dataset()
        keys = {(item.content_type, item.id) for item in dataset.content}

        assert all((v.target_type, v.target_id) in keys for v in dataset.votes)


class TestSeededStats:
    """Commendation stats over the demo dataset."""

    @pytest.mark.asyncio
    async def test_demo_editor_stats(self):
        """The editor's stats should reflect the seeded votes and reports."""
        # Arrange
        store = await seeded_store()
        content_repo = InMemoryContentRepository(store)
        challenge_repo = InMemoryChallengeRepository(store)
        service = CommendationService(
            ContributionService(
                content_repo, challenge_repo, InMemoryCitationRepository(store)
            ),
            EngagementService(InMemoryVoteRepository(store), challenge_repo),
            content_repo,
            CommendationSettings(),
        )

        # Act
        stats = await service.get_commendation_stats(DEMO_USER_ID)

        # Assert
        assert stats.reports.received == 2
        assert stats.reports.accepted == 1
        assert stats.votes.upvotes == 6
        assert stats.votes.downvotes == 1
        assert stats.contributions.citations == 2
        assert stats.contributions.adages == 6
        assert stats.contributions.blog_posts == 2
        assert stats.contributions.comments == 2
        hidden = [
            p
            for p in stats.popular_posts
            if p.summary.content_type == ContentType.COMMENT and p.summary.is_hidden
        ]
        assert hidden == []
        assert len(stats.popular_posts) == 10
