"""Unit tests for vote reduction and popularity ranking."""

import random
from datetime import timedelta
from uuid import uuid4

import pytest

from adages.domain.model import ContentSummary, ScoredContent
from adages.domain.service import combine_tallies, rank_popular, reduce_votes
from adages.domain.value import ContentId, ContentType, UserId, VoteTally
from tests.conftest import BASE_TIME, make_comment, make_votes


def scored(
    content_type: ContentType = ContentType.COMMENT,
    up: int = 0,
    down: int = 0,
    minutes: int = 0,
    **summary_fields,
) -> ScoredContent:
    """Build a scored item without going through a repository."""
    summary = ContentSummary(
        content_type=content_type,
        id=ContentId(uuid4()),
        author_id=UserId(uuid4()),
        text="text",
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **summary_fields,
    )
    return ScoredContent(summary=summary, tally=VoteTally.of(up, down))


class TestReduceVotes:
    """Tests for reduce_votes."""

    def test_empty_list_gives_zero_tally(self):
        """No votes should reduce to all zeros."""
        assert reduce_votes([]) == VoteTally(upvotes=0, downvotes=0, net=0)

    def test_counts_up_and_down_votes(self):
        """Mixed votes should be split into up and down counts."""
        comment = make_comment(UserId(uuid4()))

        tally = reduce_votes(make_votes(comment, [1, 1, -1]))

        assert tally.upvotes == 2
        assert tally.downvotes == 1
        assert tally.net == 1

    @pytest.mark.parametrize("seed", range(5))
    def test_net_is_always_up_minus_down(self, seed):
        """Net should equal upvotes minus downvotes for any vote list."""
        rng = random.Random(seed)
        comment = make_comment(UserId(uuid4()))
        values = [rng.choice([1, -1]) for _ in range(rng.randint(0, 40))]

        tally = reduce_votes(make_votes(comment, values))

        assert tally.net == tally.upvotes - tally.downvotes
        assert tally.total == len(values)

    def test_accepts_generator(self):
        """Any iterable of votes should be accepted."""
        comment = make_comment(UserId(uuid4()))
        votes = make_votes(comment, [1, -1, -1])

        tally = reduce_votes(v for v in votes)

        assert tally == VoteTally.of(1, 2)


class TestCombineTallies:
    """Tests for combine_tallies."""

    def test_sums_tallies(self):
        """Tallies should add component-wise."""
        total = combine_tallies([VoteTally.of(2, 1), VoteTally.of(0, 3), VoteTally()])

        assert total == VoteTally.of(2, 4)
        assert total.net == -2

    def test_no_tallies_gives_zero(self):
        assert combine_tallies([]) == VoteTally()


class TestRankPopular:
    """Tests for rank_popular."""

    def test_orders_by_score_descending(self):
        """Higher net score should rank first."""
        low = scored(up=1)
        high = scored(up=5, down=1)
        mid = scored(up=2)

        ranked = rank_popular([low, high, mid])

        assert ranked == [high, mid, low]

    def test_newer_item_wins_score_tie(self):
        """Among equal scores the newest item should rank first."""
        older = scored(up=3, minutes=0)
        newer = scored(up=3, minutes=10)

        ranked = rank_popular([older, newer])

        assert ranked == [newer, older]

    def test_full_tie_breaks_by_category_then_id(self):
        """Equal score and timestamp should fall back to a fixed order."""
        items = [
            scored(ContentType.ADAGE, up=2),
            scored(ContentType.COMMENT, up=2),
            scored(ContentType.COMMENT, up=2),
            scored(ContentType.FORUM_THREAD, up=2),
        ]
        comments = sorted(items[1:3], key=lambda item: str(item.summary.id))

        ranked = rank_popular(items)

        assert ranked == [*comments, items[0], items[3]]

    def test_ranking_is_stable_across_input_orders(self):
        """Shuffling the input should not change the output order."""
        items = [scored(up=2) for _ in range(6)] + [scored(up=4), scored(up=1)]
        expected = rank_popular(items)

        rng = random.Random(7)
        for _ in range(10):
            shuffled = items[:]
            rng.shuffle(shuffled)
            assert rank_popular(shuffled) == expected

    def test_truncates_to_limit(self):
        """At most ``limit`` items should be returned."""
        items = [scored(up=i) for i in range(15)]

        ranked = rank_popular(items, limit=10)

        assert len(ranked) == 10
        assert ranked[0].score == 14
        assert ranked[-1].score == 5

    def test_deleted_items_are_dropped(self):
        """Soft-deleted items should never rank."""
        deleted = scored(up=50, deleted_at=BASE_TIME)
        live = scored(up=1)

        assert rank_popular([deleted, live]) == [live]

    def test_hidden_comment_is_dropped_even_with_top_score(self):
        """A hidden comment should be excluded regardless of score."""
        hidden = scored(ContentType.COMMENT, up=10, hidden_at=BASE_TIME)
        other = scored(ContentType.ADAGE, up=1)

        assert rank_popular([hidden, other]) == [other]

    def test_unvoted_items_are_eligible_by_default(self):
        """Items with no votes should still be eligible."""
        unvoted = scored()

        assert rank_popular([unvoted]) == [unvoted]

    def test_unvoted_items_can_be_excluded(self):
        """include_unvoted=False should drop items nobody voted on."""
        unvoted = scored()
        cancelled = scored(up=1, down=1)

        ranked = rank_popular([unvoted, cancelled], include_unvoted=False)

        assert ranked == [cancelled]

    def test_mixed_naive_and_aware_timestamps(self):
        """Naive timestamps should be compared as UTC."""
        aware = scored(up=1, minutes=5)
        naive_summary = aware.summary.model_copy(
            update={
                "id": ContentId(uuid4()),
                "created_at": BASE_TIME.replace(tzinfo=None),
            }
        )
        naive = ScoredContent(summary=naive_summary, tally=VoteTally.of(1, 0))

        assert rank_popular([naive, aware]) == [aware, naive]
