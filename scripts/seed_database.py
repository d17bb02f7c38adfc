#!/usr/bin/env python3
"""Write the demo dataset to PostgreSQL.

Rows use stable ids and inserts skip existing ids, so running the script
again leaves the database unchanged.
"""

import asyncio
import sys

import logfire

from adages.config import Settings
from adages.persistence.database import create_engine, create_session_factory
from adages.persistence.repository import (
    PostgresChallengeRepository,
    PostgresCitationRepository,
    PostgresContentRepository,
    PostgresLibraryRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from adages.persistence.seed import build_demo_dataset, seed_repositories
from adages.util.logging import setup_logging
from adages.util.observability import configure_logfire


async def seed(settings: Settings) -> None:
    """Seed the configured database."""
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    try:
        await seed_repositories(
            build_demo_dataset(),
            PostgresUserRepository(session_factory),
            PostgresContentRepository(session_factory),
            PostgresVoteRepository(session_factory),
            PostgresChallengeRepository(session_factory),
            PostgresCitationRepository(session_factory),
            PostgresLibraryRepository(session_factory),
        )
    finally:
        await engine.dispose()


def main() -> int:
    """Seed the database and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Seeding demo dataset")
        asyncio.run(seed(settings))
        logfire.info("Demo dataset written")
        return 0

    except Exception as e:
        logfire.error(
            "Seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
