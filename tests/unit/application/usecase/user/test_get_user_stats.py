"""Unit tests for GetUserStatsUseCase."""

from uuid import uuid4

import pytest

from adages.application.usecase.user import GetUserStatsUseCase
from adages.application.usecase.user.get_user_stats import GetUserStatsRequest
from adages.config import CommendationSettings
from adages.domain.error import NotFoundError
from adages.domain.service import (
    CommendationService,
    ContributionService,
    EngagementService,
    UserService,
)
from adages.persistence.repository.inmemory import (
    InMemoryChallengeRepository,
    InMemoryCitationRepository,
    InMemoryContentRepository,
    InMemoryLibraryRepository,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_comment, make_user, make_votes


def build_use_case(store: InMemoryStore, preview_length: int = 100):
    settings = CommendationSettings(preview_length=preview_length)
    content_repo = InMemoryContentRepository(store)
    challenge_repo = InMemoryChallengeRepository(store)
    user_service = UserService(
        InMemoryUserRepository(store), content_repo, InMemoryLibraryRepository(store)
    )
    commendation_service = CommendationService(
        ContributionService(
            content_repo, challenge_repo, InMemoryCitationRepository(store)
        ),
        EngagementService(InMemoryVoteRepository(store), challenge_repo),
        content_repo,
        settings,
    )
    return GetUserStatsUseCase(user_service, commendation_service, settings)


class TestGetUserStatsUseCase:
    """Tests for GetUserStatsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_commendation_stats(self):
        """Stats should be rendered with truncated comment previews."""
        # Arrange
        store = InMemoryStore()
        use_case = build_use_case(store, preview_length=10)
        user = await InMemoryUserRepository(store).save(make_user())
        comment = await InMemoryContentRepository(store).save(
            make_comment(user.id, content="Every cloud has a silver lining.")
        )
        for vote in make_votes(comment, [1, 1, 1]):
            await InMemoryVoteRepository(store).save(vote)

        # Act
        response = await use_case.execute(GetUserStatsRequest(user_id=user.id))

        # Assert
        assert response.votes.net == 3
        assert len(response.popular_posts) == 1
        post = response.popular_posts[0]
        assert post.type == "comment"
        assert post.id == str(comment.id)
        assert post.score == 3
        assert post.content == "Every clou"
        assert post.target_id == str(comment.target_id)

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self):
        use_case = build_use_case(InMemoryStore())

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserStatsRequest(user_id=uuid4()))
