"""Domain value objects for the adages community.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum

from pydantic import Field, model_validator

from adages.domain.value.common import ValueObject


class ContentType(str, Enum):
    """Category of user-authored content.

    The values are the ``target_type`` strings stored on votes and
    challenges, so they double as the wire format.
    """

    COMMENT = "comment"
    BLOG = "blog"
    ADAGE = "adage"
    FORUM_REPLY = "forum_reply"
    FORUM_THREAD = "forum_thread"

    @property
    def reportable(self) -> bool:
        """Whether readers can file challenges against this category."""
        return self in REPORTABLE_CONTENT_TYPES


# Declaration order is the canonical category order (used for tie-breaks)
CONTENT_TYPES: tuple[ContentType, ...] = tuple(ContentType)

REPORTABLE_CONTENT_TYPES: frozenset[ContentType] = frozenset(
    {ContentType.COMMENT, ContentType.BLOG, ContentType.ADAGE}
)


class VoteValue(IntEnum):
    """Direction of a vote."""

    DOWN = -1
    UP = 1


class ChallengeStatus(str, Enum):
    """Moderation state of a reader challenge."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class UserRole(str, Enum):
    """Community role, lowest privilege first."""

    BANNED = "banned"
    RESTRICTED = "restricted"
    PROBATION = "probation"
    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class VoteTally(ValueObject):
    """Up/down vote counts for one item or an aggregate of items."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    net: int = 0

    @model_validator(mode="after")
    def validate_net(self) -> "VoteTally":
        """Net must equal upvotes minus downvotes."""
        if self.net != self.upvotes - self.downvotes:
            raise ValueError("net must equal upvotes - downvotes")
        return self

    @classmethod
    def of(cls, upvotes: int, downvotes: int) -> "VoteTally":
        """Build a tally from raw counts."""
        return cls(upvotes=upvotes, downvotes=downvotes, net=upvotes - downvotes)

    @property
    def total(self) -> int:
        """Number of votes counted."""
        return self.upvotes + self.downvotes

    def __add__(self, other: "VoteTally") -> "VoteTally":
        return VoteTally.of(
            self.upvotes + other.upvotes, self.downvotes + other.downvotes
        )
