"""Votable content entities.

Five categories of user-authored content can receive votes: comments,
blog posts, adages, forum replies and forum threads. They live in separate
tables with different columns, but the statistics code only needs a common
projection of them, ``ContentSummary``.
"""

from abc import abstractmethod
from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from adages.domain.model.common import DomainModel
from adages.domain.value import ContentId, ContentType, UserId


class ContentSummary(DomainModel):
    """Category-independent view of a content item.

    ``text`` is the item's display text: comment/reply body, blog or
    thread title, or the adage itself. The optional link fields are only
    set for the categories that have them.
    """

    content_type: ContentType
    id: ContentId
    author_id: UserId
    text: str = ""
    created_at: datetime
    deleted_at: Optional[datetime] = None
    hidden_at: Optional[datetime] = None
    slug: Optional[str] = None
    thread_id: Optional[ContentId] = None
    target_type: Optional[str] = None
    target_id: Optional[ContentId] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_hidden(self) -> bool:
        return self.hidden_at is not None


class ContentItem(DomainModel):
    """Fields shared by every content category.

    ``author_id`` maps to ``user_id`` on comments and ``created_by`` on
    adages; the persistence layer handles the column naming.
    """

    content_type: ClassVar[ContentType]

    id: ContentId
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
    hidden_at: Optional[datetime] = None

    def _summary(self, **fields) -> ContentSummary:
        return ContentSummary(
            content_type=self.content_type,
            id=self.id,
            author_id=self.author_id,
            created_at=self.created_at,
            deleted_at=self.deleted_at,
            hidden_at=self.hidden_at,
            **fields,
        )

    @abstractmethod
    def summarize(self) -> ContentSummary:
        """Project the item onto ``ContentSummary``."""
        pass


class Comment(ContentItem):
    """Comment attached to an adage, blog post or other page.

    Moderators can hide a comment (``hidden_at``) without deleting it.
    """

    content_type: ClassVar[ContentType] = ContentType.COMMENT

    content: str = Field(min_length=1, max_length=10000)
    target_type: str
    target_id: ContentId

    def summarize(self) -> ContentSummary:
        return self._summary(
            text=self.content, target_type=self.target_type, target_id=self.target_id
        )


class BlogPost(ContentItem):
    """Blog post."""

    content_type: ClassVar[ContentType] = ContentType.BLOG

    title: str = Field(min_length=1, max_length=300)
    slug: str

    def summarize(self) -> ContentSummary:
        return self._summary(text=self.title, slug=self.slug)


class Adage(ContentItem):
    """Adage entry in the archive."""

    content_type: ClassVar[ContentType] = ContentType.ADAGE

    adage: str = Field(min_length=1)

    def summarize(self) -> ContentSummary:
        return self._summary(text=self.adage)


class ForumThread(ContentItem):
    """Forum thread opening post."""

    content_type: ClassVar[ContentType] = ContentType.FORUM_THREAD

    title: str = Field(min_length=1, max_length=300)
    slug: str

    def summarize(self) -> ContentSummary:
        return self._summary(text=self.title, slug=self.slug)


class ForumReply(ContentItem):
    """Reply inside a forum thread."""

    content_type: ClassVar[ContentType] = ContentType.FORUM_REPLY

    content: str = Field(min_length=1, max_length=10000)
    thread_id: ContentId

    def summarize(self) -> ContentSummary:
        return self._summary(text=self.content, thread_id=self.thread_id)
