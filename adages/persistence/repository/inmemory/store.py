"""Shared in-process storage for the in-memory repositories."""

from adages.domain.model import (
    Challenge,
    Citation,
    Collection,
    ContentItem,
    SavedAdage,
    User,
    Vote,
)
from adages.domain.value import CONTENT_TYPES, ContentId, ContentType, UserId


class InMemoryStore:
    """Rows of every table, held in plain dicts and lists.

    The repositories built on one store see each other's writes, the way
    repositories over one database do.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.content: dict[ContentType, dict[ContentId, ContentItem]] = {
            content_type: {} for content_type in CONTENT_TYPES
        }
        self.votes: list[Vote] = []
        self.challenges: list[Challenge] = []
        self.citations: list[Citation] = []
        self.saved_adages: list[SavedAdage] = []
        self.collections: list[Collection] = []
