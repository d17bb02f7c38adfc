"""Persistence infrastructure providers.

Two variants of the persistence component: PostgreSQL and in-process
memory. Repositories are APP-scoped; PostgreSQL repositories open a
session per query, so one instance is safe to share.
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from adages.config import PersistenceSettings, Settings
from adages.domain.repository import (
    ChallengeRepository,
    CitationRepository,
    ContentRepository,
    LibraryRepository,
    UserRepository,
    VoteRepository,
)
from adages.persistence.database import create_engine, create_session_factory
from adages.persistence.repository import (
    PostgresChallengeRepository,
    PostgresCitationRepository,
    PostgresContentRepository,
    PostgresLibraryRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
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
from adages.persistence.seed import build_demo_dataset, seed_repositories
from adages.util.di.base import ProviderBase
from adages.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __component__ = "persistence"


class PostgresPersistenceProvider(PersistenceProvider):
    """Persistence provider using PostgreSQL."""

    __variant__ = "postgres"

    scope = Scope.APP

    @provide
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide
    def get_user_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session_factory)

    @provide
    def get_content_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> ContentRepository:
        """Provide Content repository."""
        return PostgresContentRepository(session_factory)

    @provide
    def get_vote_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session_factory)

    @provide
    def get_challenge_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> ChallengeRepository:
        """Provide Challenge repository."""
        return PostgresChallengeRepository(session_factory)

    @provide
    def get_citation_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> CitationRepository:
        """Provide Citation repository."""
        return PostgresCitationRepository(session_factory)

    @provide
    def get_library_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> LibraryRepository:
        """Provide Library repository."""
        return PostgresLibraryRepository(session_factory)


class MemoryPersistenceProvider(PersistenceProvider):
    """Persistence provider using in-process repositories.

    One store per container; it is seeded with the demo dataset when
    ``PERSISTENCE__SEED_DEMO_DATA`` is set.
    """

    __variant__ = "memory"

    scope = Scope.APP

    @provide
    async def get_store(self, settings: PersistenceSettings) -> InMemoryStore:
        """Provide the shared in-memory store."""
        store = InMemoryStore()
        if settings.seed_demo_data:
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

    @provide
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide
    def get_content_repository(self, store: InMemoryStore) -> ContentRepository:
        """Provide in-memory content repository."""
        return InMemoryContentRepository(store)

    @provide
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)

    @provide
    def get_challenge_repository(self, store: InMemoryStore) -> ChallengeRepository:
        """Provide in-memory challenge repository."""
        return InMemoryChallengeRepository(store)

    @provide
    def get_citation_repository(self, store: InMemoryStore) -> CitationRepository:
        """Provide in-memory citation repository."""
        return InMemoryCitationRepository(store)

    @provide
    def get_library_repository(self, store: InMemoryStore) -> LibraryRepository:
        """Provide in-memory library repository."""
        return InMemoryLibraryRepository(store)
