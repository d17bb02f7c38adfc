"""Unit tests for ContributionService and EngagementService."""

from datetime import datetime
from uuid import uuid4

import pytest

from adages.domain.model import AuthoredContent, Citation
from adages.domain.service import ContributionService, EngagementService
from adages.domain.value import (
    CONTENT_TYPES,
    ChallengeStatus,
    CitationId,
    ContentId,
    ContentType,
    UserId,
    VoteTally,
)
from adages.persistence.repository.inmemory import (
    InMemoryChallengeRepository,
    InMemoryCitationRepository,
    InMemoryContentRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from tests.conftest import (
    BASE_TIME,
    make_adage,
    make_blog_post,
    make_challenge,
    make_comment,
    make_votes,
)


class BrokenCitationRepository(InMemoryCitationRepository):
    async def count_by_submitter(self, user_id):
        raise TimeoutError("citations table locked")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def contribution_service(store):
    return ContributionService(
        InMemoryContentRepository(store),
        InMemoryChallengeRepository(store),
        InMemoryCitationRepository(store),
    )


@pytest.fixture
def engagement_service(store):
    return EngagementService(
        InMemoryVoteRepository(store), InMemoryChallengeRepository(store)
    )


class TestLocateAuthoredContent:
    """Tests for locate_authored_content."""

    @pytest.mark.asyncio
    async def test_every_category_present_even_when_empty(self, contribution_service):
        """A user with nothing should get empty tuples for every category."""
        authored = await contribution_service.locate_authored_content(UserId(uuid4()))

        assert authored.is_empty
        assert set(authored.ids) == set(CONTENT_TYPES)

    @pytest.mark.asyncio
    async def test_newest_first_and_excludes_deleted(self, store, contribution_service):
        """Ids should be newest first with deleted items left out."""
        # Arrange
        author = UserId(uuid4())
        repo = InMemoryContentRepository(store)
        old = await repo.save(make_comment(author, minutes=0))
        new = await repo.save(make_comment(author, minutes=5))
        await repo.save(make_comment(author, minutes=9, deleted_at=BASE_TIME))
        await repo.save(make_comment(UserId(uuid4()), minutes=3))

        # Act
        authored = await contribution_service.locate_authored_content(author)

        # Assert
        assert authored.for_type(ContentType.COMMENT) == (new.id, old.id)
        assert authored.for_type(ContentType.ADAGE) == ()


class TestCountContributions:
    """Tests for count_contributions."""

    @pytest.mark.asyncio
    async def test_counts_each_table(self, store, contribution_service):
        """Citations, challenges filed and authored rows should be counted."""
        # Arrange
        user = UserId(uuid4())
        content_repo = InMemoryContentRepository(store)
        adage = await content_repo.save(make_adage(user))
        await content_repo.save(make_adage(user, deleted_at=BASE_TIME))
        await content_repo.save(make_blog_post(user))
        await content_repo.save(make_comment(user))
        await content_repo.save(make_comment(user, hidden_at=BASE_TIME))

        citation_repo = InMemoryCitationRepository(store)
        await citation_repo.save(
            Citation(
                id=CitationId(uuid4()),
                submitted_by=user,
                adage_id=adage.id,
                source="Bartlett's Familiar Quotations",
            )
        )
        other_adage = make_adage(UserId(uuid4()))
        await InMemoryChallengeRepository(store).save(
            make_challenge(other_adage, challenger_id=user)
        )

        # Act
        counts = await contribution_service.count_contributions(user)

        # Assert
        assert counts.citations == 1
        assert counts.challenges == 1
        assert counts.comments == 2  # hidden comments still count
        assert counts.blog_posts == 1
        assert counts.adages == 1

    @pytest.mark.asyncio
    async def test_failing_count_is_zero(self, store):
        """A failing count should be reported as zero, others unaffected."""
        # Arrange
        user = UserId(uuid4())
        await InMemoryContentRepository(store).save(make_adage(user))
        service = ContributionService(
            InMemoryContentRepository(store),
            InMemoryChallengeRepository(store),
            BrokenCitationRepository(store),
        )

        # Act
        counts = await service.count_contributions(user)

        # Assert
        assert counts.citations == 0
        assert counts.adages == 1


class TestEngagementService:
    """Tests for EngagementService."""

    @pytest.mark.asyncio
    async def test_reports_only_for_reportable_categories(
        self, store, engagement_service
    ):
        """Forum categories should never be asked for reports."""
        # Arrange
        comment = make_comment(UserId(uuid4()))
        await InMemoryChallengeRepository(store).save(
            make_challenge(comment, ChallengeStatus.ACCEPTED)
        )
        authored = AuthoredContent(
            ids={
                ContentType.COMMENT: (comment.id,),
                ContentType.FORUM_THREAD: (ContentId(uuid4()),),
            }
        )

        # Act
        reports = await engagement_service.fetch_reports(authored)

        # Assert
        assert set(reports) == {
            ContentType.COMMENT,
            ContentType.BLOG,
            ContentType.ADAGE,
        }
        assert len(reports[ContentType.COMMENT]) == 1
        assert reports[ContentType.BLOG] == []

    @pytest.mark.asyncio
    async def test_item_tallies_keyed_by_category(self, store, engagement_service):
        """Tallies should be keyed by (category, id) and skip unvoted items."""
        # Arrange
        author = UserId(uuid4())
        adage = make_adage(author)
        unvoted = make_adage(author)
        vote_repo = InMemoryVoteRepository(store)
        for vote in make_votes(adage, [1, 1, -1]):
            await vote_repo.save(vote)
        authored = AuthoredContent(
            ids={ContentType.ADAGE: (adage.id, unvoted.id)}
        )

        # Act
        tallies = await engagement_service.fetch_item_tallies(authored)

        # Assert
        assert tallies == {(ContentType.ADAGE, adage.id): VoteTally.of(2, 1)}

    @pytest.mark.asyncio
    async def test_votes_grouped_by_category(self, store, engagement_service):
        """Votes should come back under the category they target."""
        # Arrange
        author = UserId(uuid4())
        post = make_blog_post(author, created_at=datetime(2025, 1, 1))
        vote_repo = InMemoryVoteRepository(store)
        for vote in make_votes(post, [1, -1]):
            await vote_repo.save(vote)
        authored = AuthoredContent(ids={ContentType.BLOG: (post.id,)})

        # Act
        votes = await engagement_service.fetch_votes(authored)

        # Assert
        assert len(votes[ContentType.BLOG]) == 2
        assert votes[ContentType.COMMENT] == []
