"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from qanda.domain.model import Answer, Question, Topic, User, Vote
from qanda.domain.value import (
    AnswerId,
    QuestionId,
    TargetKind,
    TopicId,
    TopicName,
    TopicSlug,
    UserId,
    VoteCounts,
    VoteDirection,
    VoteId,
    VoteTarget,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row.get("email") or "",
        image=row.get("image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic(
        id=TopicId(_uuid(row["id"])),
        name=TopicName(row["name"]),
        slug=TopicSlug(row["slug"]),
        description=row.get("description"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict."""
    return {
        "id": topic.id,
        "name": topic.name.root,
        "slug": topic.slug.root,
        "description": topic.description,
        "created_at": topic.created_at,
        "updated_at": topic.updated_at,
    }


def row_to_question(
    row: Dict[str, Any], topic_ids: Sequence[UUID] = ()
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        topic_ids: Topic IDs linked through question_topics

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        topic_ids=[TopicId(_uuid(tid)) for tid in topic_ids],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Topic links live in their own table and are excluded.
    """
    return question.model_dump(exclude={"topic_ids"})


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    The (target_kind, target_id) column pair becomes a ``VoteTarget``.
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["user_id"])),
        target=VoteTarget(
            kind=TargetKind(row["target_kind"]), id=_uuid(row["target_id"])
        ),
        direction=VoteDirection(row["direction"]),
        voted_at=row["voted_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "user_id": vote.voter_id,
        "target_id": vote.target.id,
        "target_kind": vote.target.kind.value,
        "direction": vote.direction.value,
        "voted_at": vote.voted_at,
    }


def row_to_counts(row: Dict[str, Any]) -> VoteCounts:
    """Convert a tally row (upvotes, downvotes) to VoteCounts."""
    return VoteCounts(
        upvotes=int(row.get("upvotes") or 0),
        downvotes=int(row.get("downvotes") or 0),
    )
