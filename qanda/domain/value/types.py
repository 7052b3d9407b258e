"""Domain value objects for the Q&A service.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
import re
from enum import Enum
from uuid import UUID

from pydantic import Field, computed_field, field_validator

from qanda.domain.value.common import RootValueObject, ValueObject
from qanda.domain.value.identifiers import UserId

TOPIC_NAME_MAX_LENGTH = 50
TOPIC_SLUG_MAX_LENGTH = 50

_WHITESPACE = re.compile(r"\s+")


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class TargetKind(str, Enum):
    """Kind of content that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class SortOrder(str, Enum):
    """Feed ordering."""

    RECENT = "recent"  # created_at desc
    MOST_VOTED = "most_voted"  # net score desc, then created_at desc


class VoteTarget(ValueObject):
    """A votable item: a question or an answer, identified by kind and id.

    The kind is validated against ``TargetKind`` on construction so the
    data layer never sees a free-form discriminant.
    """

    kind: TargetKind
    id: UUID

    @classmethod
    def question(cls, question_id: UUID) -> "VoteTarget":
        return cls(kind=TargetKind.QUESTION, id=question_id)

    @classmethod
    def answer(cls, answer_id: UUID) -> "VoteTarget":
        return cls(kind=TargetKind.ANSWER, id=answer_id)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


class VoteCounts(ValueObject):
    """Live vote tallies for one target."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net(self) -> int:
        """Net score (upvotes minus downvotes)."""
        return self.upvotes - self.downvotes

    @classmethod
    def zero(cls) -> "VoteCounts":
        return cls(upvotes=0, downvotes=0)


def normalize_slug(text: str) -> str:
    """Normalize free text into a topic slug.

    Trims, lowercases and collapses each whitespace run into a single
    hyphen. Applying it to its own output returns the same string.
    """
    return _WHITESPACE.sub("-", text.strip().lower())


class TopicSlug(RootValueObject[str]):
    """URL-safe topic slug.

    Lowercase with whitespace replaced by hyphens, 1-50 characters.
    Examples: 'machine-learning', 'arts-culture'
    """

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate slug is normalized and within length limits."""
        if not v or len(v) > TOPIC_SLUG_MAX_LENGTH:
            raise ValueError(
                f"Slug must be 1-{TOPIC_SLUG_MAX_LENGTH} characters"
            )
        if normalize_slug(v) != v:
            raise ValueError("Slug must be lowercase without surrounding whitespace")
        return v

    @classmethod
    def from_text(cls, text: str) -> "TopicSlug":
        """Derive a slug from a topic name or user-supplied slug."""
        return cls(normalize_slug(text))


class TopicName(RootValueObject[str]):
    """Topic name, stored trimmed and lowercased, 1-50 characters."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is normalized and within length limits."""
        if not v or len(v) > TOPIC_NAME_MAX_LENGTH:
            raise ValueError(
                f"Topic name must be 1-{TOPIC_NAME_MAX_LENGTH} characters"
            )
        if v != v.strip().lower():
            raise ValueError("Topic name must be trimmed and lowercase")
        return v

    @classmethod
    def from_text(cls, text: str) -> "TopicName":
        return cls(text.strip().lower())


class Author(ValueObject):
    """Public identity of a content author or voter."""

    id: UserId
    name: str
    email: str = ""
    image: str | None = None

    @classmethod
    def placeholder(cls, user_id: UserId) -> "Author":
        """Identity shown when the referenced user cannot be resolved."""
        return cls(id=user_id, name="Unknown User", email="", image=None)


class AuthenticatedUser(ValueObject):
    """Verified caller identity, as asserted by the identity provider."""

    user_id: UserId
    name: str | None = None


class PageRequest(ValueObject):
    """A validated page window."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PageInfo(ValueObject):
    """Pagination metadata for a listing."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def of(cls, request: PageRequest, total: int) -> "PageInfo":
        return cls(
            page=request.page,
            limit=request.limit,
            total=total,
            total_pages=math.ceil(total / request.limit),
        )
