"""Demo dataset for local development.

Ids are derived with ``uuid5`` from stable names so seeding the same
backend twice writes the same rows.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import NAMESPACE_URL, uuid5

import logfire

from adages.domain.model import (
    Adage,
    BlogPost,
    Challenge,
    Citation,
    Collection,
    Comment,
    ContentItem,
    ForumReply,
    ForumThread,
    SavedAdage,
    User,
    Vote,
)
from adages.domain.repository import (
    ChallengeRepository,
    CitationRepository,
    ContentRepository,
    LibraryRepository,
    UserRepository,
    VoteRepository,
)
from adages.domain.value import (
    ChallengeId,
    ChallengeStatus,
    CitationId,
    CollectionId,
    ContentId,
    ContentType,
    SavedAdageId,
    UserId,
    UserRole,
    VoteId,
    VoteValue,
)

SEED_NAMESPACE = uuid5(NAMESPACE_URL, "https://americanadages.org/seed")
SEED_EPOCH = datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)


def seed_id(name: str):
    """Stable UUID for a seed row."""
    return uuid5(SEED_NAMESPACE, name)


DEMO_USER_ID = UserId(seed_id("user:editor"))
READER_USER_ID = UserId(seed_id("user:reader"))

ADAGES = [
    "A penny saved is a penny earned",
    "Actions speak louder than words",
    "Better late than never",
    "Don't count your chickens before they hatch",
    "The early bird catches the worm",
    "Where there's smoke, there's fire",
]

BLOG_POSTS = [
    (
        'Words That Shaped America: The Power of "E Pluribus Unum"',
        "words-that-shaped-america-e-pluribus-unum",
    ),
    (
        'The Etymology of "Better Late Than Never"',
        "etymology-of-better-late-than-never",
    ),
]


@dataclass
class DemoDataset:
    """Rows of the demo dataset, grouped by repository."""

    users: list[User] = field(default_factory=list)
    content: list[ContentItem] = field(default_factory=list)
    votes: list[Vote] = field(default_factory=list)
    challenges: list[Challenge] = field(default_factory=list)
    citations: list[Citation] = field(default_factory=list)
    saved_adages: list[SavedAdage] = field(default_factory=list)
    collections: list[Collection] = field(default_factory=list)


def build_demo_dataset() -> DemoDataset:
    """Build the demo dataset.

    One editor authors the archive, blog and forum content; a reader
    comments, votes and files challenges.
    """
    data = DemoDataset()

    def at(hours: int) -> datetime:
        return SEED_EPOCH + timedelta(hours=hours)

    data.users = [
        User(
            id=DEMO_USER_ID,
            email="editor@americanadages.org",
            username="editor",
            display_name="Archive Editor",
            bio="Keeper of the adage archive.",
            role=UserRole.MODERATOR,
            email_verified=True,
            created_at=SEED_EPOCH,
            updated_at=SEED_EPOCH,
        ),
        User(
            id=READER_USER_ID,
            email="reader@americanadages.org",
            username="reader",
            display_name="Curious Reader",
            email_verified=True,
            created_at=SEED_EPOCH,
            updated_at=SEED_EPOCH,
        ),
    ]

    adages = [
        Adage(
            id=ContentId(seed_id(f"adage:{text}")),
            author_id=DEMO_USER_ID,
            adage=text,
            created_at=at(i),
        )
        for i, text in enumerate(ADAGES)
    ]
    blogs = [
        BlogPost(
            id=ContentId(seed_id(f"blog:{slug}")),
            author_id=DEMO_USER_ID,
            title=title,
            slug=slug,
            created_at=at(24 + i),
        )
        for i, (title, slug) in enumerate(BLOG_POSTS)
    ]
    thread = ForumThread(
        id=ContentId(seed_id("thread:favorite-adages")),
        author_id=DEMO_USER_ID,
        title="Which adage did your family repeat most?",
        slug="which-adage-did-your-family-repeat-most",
        created_at=at(48),
    )
    replies = [
        ForumReply(
            id=ContentId(seed_id("reply:editor")),
            author_id=DEMO_USER_ID,
            thread_id=thread.id,
            content="Mine was always about the early bird.",
            created_at=at(49),
        ),
        ForumReply(
            id=ContentId(seed_id("reply:reader")),
            author_id=READER_USER_ID,
            thread_id=thread.id,
            content="Waste not, want not. Every single meal.",
            created_at=at(50),
        ),
    ]
    comments = [
        Comment(
            id=ContentId(seed_id("comment:editor-penny")),
            author_id=DEMO_USER_ID,
            content="Franklin never wrote it in exactly these words.",
            target_type=ContentType.ADAGE.value,
            target_id=adages[0].id,
            created_at=at(60),
        ),
        Comment(
            id=ContentId(seed_id("comment:editor-hidden")),
            author_id=DEMO_USER_ID,
            content="An off-topic remark a moderator hid.",
            target_type=ContentType.BLOG.value,
            target_id=blogs[0].id,
            created_at=at(61),
            hidden_at=at(62),
        ),
        Comment(
            id=ContentId(seed_id("comment:reader-late")),
            author_id=READER_USER_ID,
            content="I always heard this one from my grandmother.",
            target_type=ContentType.ADAGE.value,
            target_id=adages[2].id,
            created_at=at(63),
        ),
    ]
    data.content = [*adages, *blogs, thread, *replies, *comments]

    votes = [
        (READER_USER_ID, adages[0], VoteValue.UP),
        (READER_USER_ID, adages[2], VoteValue.UP),
        (READER_USER_ID, adages[5], VoteValue.DOWN),
        (READER_USER_ID, blogs[1], VoteValue.UP),
        (READER_USER_ID, thread, VoteValue.UP),
        (READER_USER_ID, comments[0], VoteValue.UP),
        (READER_USER_ID, comments[1], VoteValue.UP),
        (DEMO_USER_ID, comments[2], VoteValue.UP),
    ]
    data.votes = [
        Vote(
            id=VoteId(seed_id(f"vote:{voter}:{item.id}")),
            user_id=voter,
            target_type=item.content_type,
            target_id=item.id,
            value=value,
            created_at=at(70),
        )
        for voter, item, value in votes
    ]

    data.challenges = [
        Challenge(
            id=ChallengeId(seed_id("challenge:penny-attribution")),
            challenger_id=READER_USER_ID,
            target_type=ContentType.ADAGE,
            target_id=adages[0].id,
            status=ChallengeStatus.ACCEPTED,
            reason="Attribution to Franklin is disputed.",
            created_at=at(72),
        ),
        Challenge(
            id=ChallengeId(seed_id("challenge:smoke-origin")),
            challenger_id=READER_USER_ID,
            target_type=ContentType.ADAGE,
            target_id=adages[5].id,
            status=ChallengeStatus.PENDING,
            reason="Earlier usage than the archive lists.",
            created_at=at(73),
        ),
    ]

    data.citations = [
        Citation(
            id=CitationId(seed_id(f"citation:{adage.id}")),
            submitted_by=DEMO_USER_ID,
            adage_id=adage.id,
            source="Poor Richard's Almanack",
            created_at=at(80),
        )
        for adage in adages[:2]
    ]
    data.saved_adages = [
        SavedAdage(
            id=SavedAdageId(seed_id(f"saved:{adage.id}")),
            user_id=DEMO_USER_ID,
            adage_id=adage.id,
            created_at=at(90),
        )
        for adage in adages[3:]
    ]
    data.collections = [
        Collection(
            id=CollectionId(seed_id("collection:thrift")),
            user_id=DEMO_USER_ID,
            name="Thrift and patience",
            created_at=at(91),
        )
    ]
    return data


async def seed_repositories(
    dataset: DemoDataset,
    user_repository: UserRepository,
    content_repository: ContentRepository,
    vote_repository: VoteRepository,
    challenge_repository: ChallengeRepository,
    citation_repository: CitationRepository,
    library_repository: LibraryRepository,
) -> None:
    """Write the dataset through the repositories.

    Users go first and content before votes/challenges, so foreign keys
    hold on a real database.
    """
    with logfire.span("seed.demo_dataset"):
        for user in dataset.users:
            await user_repository.save(user)
        for item in dataset.content:
            await content_repository.save(item)
        for vote in dataset.votes:
            await vote_repository.save(vote)
        for challenge in dataset.challenges:
            await challenge_repository.save(challenge)
        for citation in dataset.citations:
            await citation_repository.save(citation)
        for saved in dataset.saved_adages:
            await library_repository.save_saved_adage(saved)
        for collection in dataset.collections:
            await library_repository.save_collection(collection)

        logfire.info(
            "Demo dataset seeded",
            users=len(dataset.users),
            content=len(dataset.content),
            votes=len(dataset.votes),
            challenges=len(dataset.challenges),
        )
