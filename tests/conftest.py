"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

# Tests run against the in-memory backend with an empty store unless a
# test builds its own settings.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PERSISTENCE__BACKEND", "memory")
os.environ.setdefault("PERSISTENCE__SEED_DEMO_DATA", "false")

from adages.domain.model import (  # noqa: E402
    Adage,
    BlogPost,
    Challenge,
    Comment,
    ForumReply,
    ForumThread,
    User,
    Vote,
)
from adages.domain.value import (  # noqa: E402
    ChallengeId,
    ChallengeStatus,
    ContentId,
    ContentType,
    UserId,
    VoteId,
    VoteValue,
)

BASE_TIME = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_user(**overrides) -> User:
    """Build a user with sensible defaults."""
    fields = {
        "id": UserId(uuid4()),
        "email": "someone@example.org",
        "username": "someone",
        "display_name": "Someone",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    fields.update(overrides)
    return User(**fields)


def make_comment(author_id: UserId, minutes: int = 0, **overrides) -> Comment:
    """Build a comment on an adage, ``minutes`` after BASE_TIME."""
    fields = {
        "id": ContentId(uuid4()),
        "author_id": author_id,
        "content": "A fine saying.",
        "target_type": ContentType.ADAGE.value,
        "target_id": ContentId(uuid4()),
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return Comment(**fields)


def make_adage(author_id: UserId, minutes: int = 0, **overrides) -> Adage:
    fields = {
        "id": ContentId(uuid4()),
        "author_id": author_id,
        "adage": "Haste makes waste",
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return Adage(**fields)


def make_blog_post(author_id: UserId, minutes: int = 0, **overrides) -> BlogPost:
    post_id = ContentId(uuid4())
    fields = {
        "id": post_id,
        "author_id": author_id,
        "title": "On Thrift",
        "slug": f"on-thrift-{str(post_id)[:8]}",
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return BlogPost(**fields)


def make_thread(author_id: UserId, minutes: int = 0, **overrides) -> ForumThread:
    thread_id = ContentId(uuid4())
    fields = {
        "id": thread_id,
        "author_id": author_id,
        "title": "Sayings from home",
        "slug": f"sayings-from-home-{str(thread_id)[:8]}",
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return ForumThread(**fields)


def make_reply(
    author_id: UserId, thread_id: ContentId, minutes: int = 0, **overrides
) -> ForumReply:
    fields = {
        "id": ContentId(uuid4()),
        "author_id": author_id,
        "thread_id": thread_id,
        "content": "My grandfather said this daily.",
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return ForumReply(**fields)


def make_votes(item, values: list[int]) -> list[Vote]:
    """One vote per value on ``item``, each from a different user."""
    return [
        Vote(
            id=VoteId(uuid4()),
            user_id=UserId(uuid4()),
            target_type=item.content_type,
            target_id=item.id,
            value=VoteValue(value),
            created_at=BASE_TIME,
        )
        for value in values
    ]


def make_challenge(
    item, status: ChallengeStatus = ChallengeStatus.PENDING, **overrides
) -> Challenge:
    fields = {
        "id": ChallengeId(uuid4()),
        "challenger_id": UserId(uuid4()),
        "target_type": item.content_type,
        "target_id": item.id,
        "status": status,
        "created_at": BASE_TIME,
    }
    fields.update(overrides)
    return Challenge(**fields)
