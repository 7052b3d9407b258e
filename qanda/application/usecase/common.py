"""Response models shared by the use cases.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from qanda.domain.model import Topic, Vote
from qanda.domain.service import AnswerFeedItem, QuestionFeedItem
from qanda.domain.value import (
    Author,
    PageInfo,
    TargetKind,
    VoteCounts,
    VoteDirection,
)


class CamelModel(BaseModel):
    """Base model serialised with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorInfo(CamelModel):
    """Display identity of an author or voter."""

    id: str
    name: str
    email: str
    image: Optional[str] = None

    @classmethod
    def from_author(cls, author: Author) -> "AuthorInfo":
        return cls(
            id=str(author.id), name=author.name, email=author.email, image=author.image
        )


class VoteCountsInfo(CamelModel):
    """Vote tallies of a question or answer."""

    upvotes: int
    downvotes: int
    net: int

    @classmethod
    def from_counts(cls, counts: VoteCounts) -> "VoteCountsInfo":
        return cls(upvotes=counts.upvotes, downvotes=counts.downvotes, net=counts.net)


class PaginationInfo(CamelModel):
    """Pagination metadata."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_page_info(cls, info: PageInfo) -> "PaginationInfo":
        return cls(
            page=info.page,
            limit=info.limit,
            total=info.total,
            total_pages=info.total_pages,
        )


class QuestionItem(CamelModel):
    """Question with author, topics, tallies and the viewer's vote."""

    id: str
    title: str
    content: str
    author_id: str
    author: AuthorInfo
    topics: list[str]
    vote_counts: VoteCountsInfo
    answer_count: int
    user_vote: Optional[VoteDirection] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_feed_item(cls, item: QuestionFeedItem) -> "QuestionItem":
        question = item.question
        return cls(
            id=str(question.id),
            title=question.title,
            content=question.content,
            author_id=str(question.author_id),
            author=AuthorInfo.from_author(item.author),
            topics=item.topics,
            vote_counts=VoteCountsInfo.from_counts(item.counts),
            answer_count=item.answer_count,
            user_vote=item.viewer_vote,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class AnswerItem(CamelModel):
    """Answer with author, tallies and the viewer's vote."""

    id: str
    question_id: str
    content: str
    author_id: str
    author: AuthorInfo
    vote_counts: VoteCountsInfo
    user_vote: Optional[VoteDirection] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_feed_item(cls, item: AnswerFeedItem) -> "AnswerItem":
        answer = item.answer
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            author_id=str(answer.author_id),
            author=AuthorInfo.from_author(item.author),
            vote_counts=VoteCountsInfo.from_counts(item.counts),
            user_vote=item.viewer_vote,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class TopicItem(CamelModel):
    """Topic, with its question count when listed."""

    id: str
    name: str
    slug: str
    description: Optional[str] = None
    question_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_topic(
        cls, topic: Topic, question_count: Optional[int] = None
    ) -> "TopicItem":
        return cls(
            id=str(topic.id),
            name=topic.name.root,
            slug=topic.slug.root,
            description=topic.description,
            question_count=question_count,
            created_at=topic.created_at,
            updated_at=topic.updated_at,
        )


class VoteItem(CamelModel):
    """A single vote."""

    id: str
    vote_type: VoteDirection
    user_id: str
    item_id: str
    item_type: TargetKind
    voted_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteItem":
        return cls(
            id=str(vote.id),
            vote_type=vote.direction,
            user_id=str(vote.voter_id),
            item_id=str(vote.target.id),
            item_type=vote.target.kind,
            voted_at=vote.voted_at,
        )
