"""Vote reduction and popularity ranking.

Pure functions over already-fetched data; nothing here touches a
repository.
"""

from typing import Iterable

from adages.domain.model import ScoredContent, Vote
from adages.domain.model.common import as_utc
from adages.domain.value import CONTENT_TYPES, ContentType, VoteTally, VoteValue


def reduce_votes(votes: Iterable[Vote]) -> VoteTally:
    """Fold vote records into up/down/net counts.

    Total over any input: an empty iterable gives an all-zero tally.
    """
    upvotes = 0
    downvotes = 0
    for vote in votes:
        if vote.value == VoteValue.UP:
            upvotes += 1
        elif vote.value == VoteValue.DOWN:
            downvotes += 1
    return VoteTally.of(upvotes, downvotes)


def combine_tallies(tallies: Iterable[VoteTally]) -> VoteTally:
    """Sum several tallies."""
    return sum(tallies, VoteTally())


def is_rankable(item: ScoredContent, include_unvoted: bool = True) -> bool:
    """Whether an item may appear among a user's popular posts.

    Deleted items never do. Comments hidden by a moderator are dropped
    regardless of score.
    """
    summary = item.summary
    if summary.is_deleted:
        return False
    if summary.content_type == ContentType.COMMENT and summary.is_hidden:
        return False
    if not include_unvoted and item.tally.total == 0:
        return False
    return True


def rank_popular(
    items: Iterable[ScoredContent],
    limit: int = 10,
    include_unvoted: bool = True,
) -> list[ScoredContent]:
    """Top ``limit`` items by score, newest first among equal scores.

    Items equal on both score and timestamp keep a fixed order (category
    order, then id), so repeated calls on the same input agree.

    Args:
        items: Scored content across all categories
        limit: Maximum number of items returned
        include_unvoted: Whether items nobody voted on are eligible

    Returns:
        Ranked items, best first
    """
    eligible = [item for item in items if is_rankable(item, include_unvoted)]

    # Stable sorts: the tie-break order first, then the ranking keys
    eligible.sort(
        key=lambda item: (
            CONTENT_TYPES.index(item.summary.content_type),
            str(item.summary.id),
        )
    )
    eligible.sort(
        key=lambda item: (item.score, as_utc(item.summary.created_at)), reverse=True
    )
    return eligible[:limit]
