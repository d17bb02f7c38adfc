"""SQLAlchemy table definitions for the adages database.

The schema is owned by the hosted database; these definitions mirror the
columns the statistics service reads (and the seed script writes).
"""

from dataclasses import dataclass

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from adages.domain.value import ContentType

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False),
    Column("username", String(50), nullable=True),
    Column("display_name", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("profile_image_url", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("email_verified", Boolean, nullable=True, server_default="false"),
    Column("profile_private", Boolean, nullable=True, server_default="false"),
    Column("comments_friends_only", Boolean, nullable=True, server_default="false"),
    # Mailing-list preferences (NULL means opted in)
    Column("email_weekly_adage", Boolean, nullable=True, server_default="true"),
    Column("email_events", Boolean, nullable=True, server_default="true"),
    Column("email_site_updates", Boolean, nullable=True, server_default="true"),
    Column("email_archive_additions", Boolean, nullable=True, server_default="true"),
    Column(
        "email_comment_notifications", Boolean, nullable=True, server_default="true"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

# ============================================================================
# CONTENT TABLES
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column("target_type", String(50), nullable=False),  # adage, blog, ...
    Column("target_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("hidden_at", TIMESTAMP(timezone=True), nullable=True),  # Moderation
)

Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_target", comments_table.c.target_type, comments_table.c.target_id)

blog_posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("slug", String(300), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_blog_posts_author_id", blog_posts_table.c.author_id)

adages_table = Table(
    "adages",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("adage", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_adages_created_by", adages_table.c.created_by)

forum_threads_table = Table(
    "forum_threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("slug", String(300), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_forum_threads_author_id", forum_threads_table.c.author_id)

forum_replies_table = Table(
    "forum_replies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "thread_id",
        UUID,
        ForeignKey("forum_threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_forum_replies_author_id", forum_replies_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("target_type", String(50), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("value", SmallInteger, nullable=False),  # -1 or +1
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)

# ============================================================================
# READER CHALLENGES TABLE (content reports)
# ============================================================================
reader_challenges_table = Table(
    "reader_challenges",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "challenger_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("target_type", String(50), nullable=False),  # comment, blog, adage
    Column("target_id", UUID, nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("reason", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_reader_challenges_target",
    reader_challenges_table.c.target_type,
    reader_challenges_table.c.target_id,
)
Index("idx_reader_challenges_challenger_id", reader_challenges_table.c.challenger_id)

# ============================================================================
# CITATIONS / LIBRARY TABLES
# ============================================================================
citations_table = Table(
    "citations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "adage_id", UUID, ForeignKey("adages.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "submitted_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("source", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

saved_adages_table = Table(
    "saved_adages",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "adage_id", UUID, ForeignKey("adages.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

collections_table = Table(
    "collections",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(200), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)


# ============================================================================
# CONTENT TABLE REGISTRY
# ============================================================================
@dataclass(frozen=True)
class ContentTable:
    """Where one content category lives and how its columns are named."""

    table: Table
    author_column: str
    text_column: str

    @property
    def author(self) -> Column:
        return self.table.c[self.author_column]

    @property
    def text(self) -> Column:
        return self.table.c[self.text_column]


CONTENT_TABLES: dict[ContentType, ContentTable] = {
    ContentType.COMMENT: ContentTable(comments_table, "user_id", "content"),
    ContentType.BLOG: ContentTable(blog_posts_table, "author_id", "title"),
    ContentType.ADAGE: ContentTable(adages_table, "created_by", "adage"),
    ContentType.FORUM_REPLY: ContentTable(forum_replies_table, "author_id", "content"),
    ContentType.FORUM_THREAD: ContentTable(forum_threads_table, "author_id", "title"),
}
