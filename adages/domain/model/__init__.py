"""Domain model entities for the adages community."""

from adages.domain.model.challenge import Challenge
from adages.domain.model.commendation import (
    ActivityStats,
    AuthoredContent,
    CommendationStats,
    ContributionCounts,
    ReportCounts,
    ScoredContent,
)
from adages.domain.model.content import (
    Adage,
    BlogPost,
    Comment,
    ContentItem,
    ContentSummary,
    ForumReply,
    ForumThread,
)
from adages.domain.model.library import Citation, Collection, SavedAdage
from adages.domain.model.user import EmailPreferences, User
from adages.domain.model.vote import Vote

__all__ = [
    "User",
    "EmailPreferences",
    "ContentItem",
    "ContentSummary",
    "Comment",
    "BlogPost",
    "Adage",
    "ForumReply",
    "ForumThread",
    "Vote",
    "Challenge",
    "Citation",
    "SavedAdage",
    "Collection",
    "AuthoredContent",
    "ReportCounts",
    "ContributionCounts",
    "ScoredContent",
    "CommendationStats",
    "ActivityStats",
]
