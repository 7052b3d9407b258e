"""Shared state for the in-memory repositories.

One store backs every repository of a container so that cross-table
behaviour (topic filters, vote-ordered feeds, cascades) matches the
PostgreSQL implementations.
"""

from typing import Iterable, Optional
from uuid import UUID

from qanda.domain.model import Answer, Question, Topic, User, Vote
from qanda.domain.value import (
    AnswerId,
    QuestionId,
    SortOrder,
    TargetKind,
    TopicId,
    UserId,
    VoteCounts,
    VoteDirection,
    VoteId,
)


class InMemoryStore:
    """Tables held as dicts keyed by primary key."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.topics: dict[TopicId, Topic] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.votes: dict[VoteId, Vote] = {}

    def tally(
        self, kind: TargetKind, target_ids: Optional[Iterable[UUID]] = None
    ) -> dict[UUID, VoteCounts]:
        """Upvote/downvote counts per target of one kind."""
        wanted = set(target_ids) if target_ids is not None else None
        up: dict[UUID, int] = {}
        down: dict[UUID, int] = {}
        for vote in self.votes.values():
            if vote.target.kind != kind:
                continue
            if wanted is not None and vote.target.id not in wanted:
                continue
            bucket = up if vote.direction == VoteDirection.UPVOTE else down
            bucket[vote.target.id] = bucket.get(vote.target.id, 0) + 1

        return {
            tid: VoteCounts(upvotes=up.get(tid, 0), downvotes=down.get(tid, 0))
            for tid in set(up) | set(down)
        }

    def ordered(self, items: list, kind: TargetKind, sort: SortOrder) -> list:
        """Order questions or answers the way the feed queries do."""
        if sort == SortOrder.MOST_VOTED:
            tallies = self.tally(kind)

            def key(item):
                counts = tallies.get(item.id)
                net = counts.net if counts else 0
                return (net, item.created_at, item.id)

        else:

            def key(item):
                return (item.created_at, item.id)

        return sorted(items, key=key, reverse=True)
