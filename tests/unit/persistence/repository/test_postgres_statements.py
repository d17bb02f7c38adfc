"""Unit tests for the SQL the PostgreSQL repositories issue.

A recording session factory stands in for the database, so these run
without a server; statements are compiled with the PostgreSQL dialect.
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql

from adages.domain.value import ContentId, ContentType, UserId, VoteTally
from adages.persistence.repository import (
    PostgresChallengeRepository,
    PostgresContentRepository,
    PostgresLibraryRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from tests.conftest import make_blog_post

NOW = datetime(2025, 2, 1, tzinfo=timezone.utc)


class FakeRow(SimpleNamespace):
    def _asdict(self):
        return dict(vars(self))


class FakeResult:
    def __init__(self, rows=(), scalar=0):
        self.rows = [FakeRow(**row) for row in rows]
        self.scalar = scalar

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def scalars(self):
        first_column = [next(iter(vars(row).values())) for row in self.rows]
        return SimpleNamespace(all=lambda: first_column)

    def scalar_one(self):
        return self.scalar


class RecordingSession:
    def __init__(self, factory):
        self.factory = factory

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def execute(self, stmt):
        self.factory.statements.append(stmt)
        return self.factory.result

    async def commit(self):
        self.factory.commits += 1

    async def close(self):
        pass


class RecordingSessionFactory:
    """Callable like ``async_sessionmaker``; records executed statements."""

    def __init__(self, result: FakeResult | None = None) -> None:
        self.result = result or FakeResult()
        self.statements = []
        self.commits = 0

    def __call__(self):
        return RecordingSession(self)

    def sql(self, index: int = -1) -> str:
        return str(
            self.statements[index].compile(
                dialect=postgresql.dialect(),
                compile_kwargs={"literal_binds": False},
            )
        )


class TestPostgresContentRepository:
    """Tests for PostgresContentRepository."""

    @pytest.mark.asyncio
    async def test_find_ids_uses_category_author_column(self):
        """Adages are authored through created_by, newest first."""
        factory = RecordingSessionFactory()
        repo = PostgresContentRepository(factory)

        await repo.find_ids_by_author(ContentType.ADAGE, UserId(uuid4()))

        sql = factory.sql()
        assert "FROM adages" in sql
        assert "adages.created_by =" in sql
        assert "adages.deleted_at IS NULL" in sql
        assert "ORDER BY adages.created_at DESC, adages.id" in sql
        # Totals need every id; sampling happens afterwards
        assert "LIMIT" not in sql

    @pytest.mark.asyncio
    async def test_summaries_select_only_existing_columns(self):
        """Blog summaries should read title as text and skip hidden_at."""
        post_id = uuid4()
        author = uuid4()
        factory = RecordingSessionFactory(
            FakeResult(
                rows=[
                    {
                        "id": post_id,
                        "author_id": author,
                        "text": "On Thrift",
                        "created_at": NOW,
                        "deleted_at": None,
                        "slug": "on-thrift",
                    }
                ]
            )
        )
        repo = PostgresContentRepository(factory)

        summaries = await repo.find_summaries(ContentType.BLOG, [ContentId(post_id)])

        sql = factory.sql()
        assert "blog_posts.title AS" in sql
        assert "blog_posts.author_id AS author_id" in sql
        assert "hidden_at" not in sql
        assert summaries[0].text == "On Thrift"
        assert summaries[0].slug == "on-thrift"
        assert summaries[0].content_type == ContentType.BLOG

    @pytest.mark.asyncio
    async def test_comment_summaries_include_hidden_at(self):
        factory = RecordingSessionFactory()
        repo = PostgresContentRepository(factory)

        await repo.find_summaries(ContentType.COMMENT, [ContentId(uuid4())])

        sql = factory.sql()
        assert "comments.hidden_at" in sql
        assert "comments.user_id AS author_id" in sql

    @pytest.mark.asyncio
    async def test_empty_id_list_issues_no_query(self):
        factory = RecordingSessionFactory()
        repo = PostgresContentRepository(factory)

        assert await repo.find_summaries(ContentType.COMMENT, []) == []
        assert factory.statements == []

    @pytest.mark.asyncio
    async def test_save_is_idempotent_insert(self):
        """Saving should skip rows whose id already exists."""
        factory = RecordingSessionFactory()
        repo = PostgresContentRepository(factory)

        await repo.save(make_blog_post(UserId(uuid4())))

        sql = factory.sql()
        assert "INSERT INTO blog_posts" in sql
        assert "ON CONFLICT (id) DO NOTHING" in sql
        assert "hidden_at" not in sql
        assert factory.commits == 1


class TestPostgresVoteRepository:
    """Tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_tally_groups_by_target(self):
        """Tallies should come from one grouped, filtered count query."""
        target = uuid4()
        factory = RecordingSessionFactory(
            FakeResult(rows=[{"target_id": target, "upvotes": 4, "downvotes": 1}])
        )
        repo = PostgresVoteRepository(factory)

        tallies = await repo.tally_by_targets(ContentType.ADAGE, [ContentId(target)])

        sql = factory.sql()
        assert "GROUP BY votes.target_id" in sql
        assert "FILTER (WHERE votes.value =" in sql
        assert len(factory.statements) == 1
        assert tallies == {target: VoteTally.of(4, 1)}

    @pytest.mark.asyncio
    async def test_find_by_targets_batches_ids(self):
        factory = RecordingSessionFactory()
        repo = PostgresVoteRepository(factory)
        ids = [ContentId(uuid4()) for _ in range(3)]

        await repo.find_by_targets(ContentType.COMMENT, ids)

        sql = factory.sql()
        assert "votes.target_id IN" in sql
        assert "votes.target_type =" in sql
        assert len(factory.statements) == 1


class TestPostgresOtherRepositories:
    """Tests for user, challenge and library repositories."""

    @pytest.mark.asyncio
    async def test_user_lookup_excludes_deleted_by_default(self):
        factory = RecordingSessionFactory()
        repo = PostgresUserRepository(factory)

        assert await repo.find_by_id(UserId(uuid4())) is None
        assert "users.deleted_at IS NULL" in factory.sql()

        await repo.find_by_id(UserId(uuid4()), include_deleted=True)
        assert "deleted_at" not in factory.sql().split("WHERE")[1]

    @pytest.mark.asyncio
    async def test_challenges_exclude_withdrawn(self):
        factory = RecordingSessionFactory()
        repo = PostgresChallengeRepository(factory)

        await repo.find_by_targets(ContentType.BLOG, [ContentId(uuid4())])

        sql = factory.sql()
        assert "FROM reader_challenges" in sql
        assert "reader_challenges.deleted_at IS NULL" in sql

    @pytest.mark.asyncio
    async def test_library_counts(self):
        factory = RecordingSessionFactory(FakeResult(scalar=3))
        repo = PostgresLibraryRepository(factory)

        assert await repo.count_saved_adages(UserId(uuid4())) == 3
        assert "FROM saved_adages" in factory.sql()
        assert await repo.count_collections(UserId(uuid4())) == 3
        assert "FROM collections" in factory.sql()
