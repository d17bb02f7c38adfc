"""Read-side aggregates for contributor statistics.

None of these are persisted; they are assembled per request from the
content, vote and challenge repositories.
"""

from pydantic import Field

from adages.domain.model.challenge import Challenge
from adages.domain.model.common import DomainModel
from adages.domain.model.content import ContentSummary
from adages.domain.value import CONTENT_TYPES, ContentId, ContentType, VoteTally


class AuthoredContent(DomainModel):
    """Ids of a user's non-deleted content, one ordered tuple per category."""

    ids: dict[ContentType, tuple[ContentId, ...]] = Field(default_factory=dict)

    def for_type(self, content_type: ContentType) -> tuple[ContentId, ...]:
        return self.ids.get(content_type, ())

    @property
    def is_empty(self) -> bool:
        return not any(self.ids.values())

    def sample(self, limits: dict[ContentType, int]) -> "AuthoredContent":
        """Keep only the first ``limits[type]`` ids of each category.

        Categories missing from ``limits`` are kept whole.
        """
        return AuthoredContent(
            ids={
                content_type: self.for_type(content_type)[
                    : limits.get(content_type, len(self.for_type(content_type)))
                ]
                for content_type in CONTENT_TYPES
            }
        )


class ReportCounts(DomainModel):
    """Challenges filed against a user's content."""

    received: int = Field(default=0, ge=0)
    accepted: int = Field(default=0, ge=0)

    @classmethod
    def from_challenges(cls, challenges: list[Challenge]) -> "ReportCounts":
        return cls(
            received=len(challenges),
            accepted=sum(1 for c in challenges if c.is_accepted),
        )


class ContributionCounts(DomainModel):
    """Rows the user authored or submitted, per table."""

    citations: int = 0
    challenges: int = 0
    comments: int = 0
    blog_posts: int = 0
    adages: int = 0


class ScoredContent(DomainModel):
    """A content summary paired with its vote tally."""

    summary: ContentSummary
    tally: VoteTally = VoteTally()

    @property
    def score(self) -> int:
        return self.tally.net


class CommendationStats(DomainModel):
    """A user's standing in the community."""

    reports: ReportCounts = ReportCounts()
    votes: VoteTally = VoteTally()
    contributions: ContributionCounts = ContributionCounts()
    popular_posts: list[ScoredContent] = Field(default_factory=list)


class ActivityStats(DomainModel):
    """Library and comment counts shown on the profile header."""

    saved_adages: int = 0
    collections: int = 0
    comments: int = 0

