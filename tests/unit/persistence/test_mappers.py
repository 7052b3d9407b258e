"""Unit tests for row mappers and the tally query."""

from uuid import uuid4

from sqlalchemy.dialects import postgresql

from qanda.domain.model import Vote
from qanda.domain.value import (
    TargetKind,
    UserId,
    VoteCounts,
    VoteDirection,
    VoteId,
    VoteTarget,
)
from qanda.persistence.mappers import (
    row_to_counts,
    row_to_topic,
    row_to_vote,
    topic_to_dict,
    vote_to_dict,
)
from qanda.persistence.tally import vote_tally
from tests.conftest import BASE_TIME, make_topic


class TestVoteMapping:
    """Vote rows carry the target as a (kind, id) column pair."""

    def test_vote_columns(self):
        vote = Vote(
            id=VoteId(uuid4()),
            voter_id=UserId(uuid4()),
            target=VoteTarget.answer(uuid4()),
            direction=VoteDirection.DOWNVOTE,
            voted_at=BASE_TIME,
        )

        row = vote_to_dict(vote)

        assert row["user_id"] == vote.voter_id
        assert row["target_kind"] == "answer"
        assert row["direction"] == "downvote"

    def test_row_with_string_ids(self):
        vote_id, user_id, target_id = uuid4(), uuid4(), uuid4()

        vote = row_to_vote(
            {
                "id": str(vote_id),
                "user_id": str(user_id),
                "target_kind": "question",
                "target_id": str(target_id),
                "direction": "upvote",
                "voted_at": BASE_TIME,
            }
        )

        assert vote.id == vote_id
        assert vote.voter_id == user_id
        assert vote.target == VoteTarget.question(target_id)
        assert vote.direction == VoteDirection.UPVOTE


class TestTopicMapping:
    def test_topic_columns_hold_plain_strings(self):
        topic = make_topic("Arts & Culture", slug="arts-culture")

        row = topic_to_dict(topic)

        assert row["name"] == "arts & culture"
        assert row["slug"] == "arts-culture"
        assert row_to_topic(row) == topic


class TestTally:
    def test_missing_sums_count_as_zero(self):
        assert row_to_counts({"upvotes": None, "downvotes": 2}) == VoteCounts(
            upvotes=0, downvotes=2
        )

    def test_tally_groups_by_target_for_one_kind(self):
        tally = vote_tally(TargetKind.ANSWER, [uuid4()])

        sql = str(tally.select().compile(dialect=postgresql.dialect()))

        assert "GROUP BY votes.target_id" in sql
        assert "votes.target_kind" in sql
