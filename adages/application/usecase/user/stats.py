"""Response models shared by the user statistics use cases.

Keys the web client reads in camelCase (``commendationStats``,
``popularPosts``, ``blogPosts``) are declared as aliases; responses are
serialized by alias.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from adages.domain.model import ActivityStats, CommendationStats, ScoredContent
from adages.domain.value import ContentType


class ResponseModel(BaseModel):
    """Base for response models with camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True)


class ReportsResponse(ResponseModel):
    received: int = 0
    accepted: int = 0


class VotesResponse(ResponseModel):
    upvotes: int = 0
    downvotes: int = 0
    net: int = 0


class ContributionsResponse(ResponseModel):
    citations: int = 0
    challenges: int = 0
    comments: int = 0
    blog_posts: int = Field(default=0, alias="blogPosts")
    adages: int = 0


class PopularPostBase(ResponseModel):
    """Fields every popular post carries."""

    id: str
    score: int
    created_at: datetime


class PopularComment(PopularPostBase):
    type: Literal["comment"] = "comment"
    content: str
    target_type: Optional[str] = None
    target_id: Optional[str] = None


class PopularBlogPost(PopularPostBase):
    type: Literal["blog"] = "blog"
    title: str
    slug: Optional[str] = None


class PopularAdage(PopularPostBase):
    type: Literal["adage"] = "adage"
    adage: str


class PopularForumReply(PopularPostBase):
    type: Literal["forum_reply"] = "forum_reply"
    content: str
    thread_id: Optional[str] = None


class PopularForumThread(PopularPostBase):
    type: Literal["forum_thread"] = "forum_thread"
    title: str
    slug: Optional[str] = None


PopularPost = Annotated[
    Union[
        PopularComment,
        PopularBlogPost,
        PopularAdage,
        PopularForumReply,
        PopularForumThread,
    ],
    Field(discriminator="type"),
]


class CommendationStatsResponse(ResponseModel):
    """Commendation statistics as returned to the web client."""

    reports: ReportsResponse = ReportsResponse()
    votes: VotesResponse = VotesResponse()
    contributions: ContributionsResponse = ContributionsResponse()
    popular_posts: list[PopularPost] = Field(default_factory=list, alias="popularPosts")


class ActivityStatsResponse(ResponseModel):
    saved_adages: int = 0
    collections: int = 0
    comments: int = 0


def _optional_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def to_popular_post(item: ScoredContent, preview_length: int) -> PopularPost:
    """Render a ranked item as its category's response shape.

    Comment and reply bodies are cut to ``preview_length`` characters.
    """
    summary = item.summary
    common = {
        "id": str(summary.id),
        "score": item.score,
        "created_at": summary.created_at,
    }
    content_type = summary.content_type
    if content_type == ContentType.COMMENT:
        return PopularComment(
            **common,
            content=summary.text[:preview_length],
            target_type=summary.target_type,
            target_id=_optional_str(summary.target_id),
        )
    if content_type == ContentType.BLOG:
        return PopularBlogPost(**common, title=summary.text, slug=summary.slug)
    if content_type == ContentType.ADAGE:
        return PopularAdage(**common, adage=summary.text)
    if content_type == ContentType.FORUM_REPLY:
        return PopularForumReply(
            **common,
            content=summary.text[:preview_length],
            thread_id=_optional_str(summary.thread_id),
        )
    if content_type == ContentType.FORUM_THREAD:
        return PopularForumThread(**common, title=summary.text, slug=summary.slug)
    raise ValueError(f"Unknown content type: {summary.content_type}")


def to_commendation_response(
    stats: CommendationStats, preview_length: int
) -> CommendationStatsResponse:
    """Convert domain commendation stats to the response model."""
    contributions = stats.contributions
    return CommendationStatsResponse(
        reports=ReportsResponse(
            received=stats.reports.received, accepted=stats.reports.accepted
        ),
        votes=VotesResponse(
            upvotes=stats.votes.upvotes,
            downvotes=stats.votes.downvotes,
            net=stats.votes.net,
        ),
        contributions=ContributionsResponse(
            citations=contributions.citations,
            challenges=contributions.challenges,
            comments=contributions.comments,
            blog_posts=contributions.blog_posts,
            adages=contributions.adages,
        ),
        popular_posts=[
            to_popular_post(item, preview_length) for item in stats.popular_posts
        ],
    )


def to_activity_response(stats: ActivityStats) -> ActivityStatsResponse:
    return ActivityStatsResponse(
        saved_adages=stats.saved_adages,
        collections=stats.collections,
        comments=stats.comments,
    )
