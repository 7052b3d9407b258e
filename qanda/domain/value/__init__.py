"""Domain value objects for the Q&A service."""

from qanda.domain.value.identifiers import (
    AnswerId,
    QuestionId,
    TopicId,
    UserId,
    VoteId,
)
from qanda.domain.value.types import (
    Author,
    AuthenticatedUser,
    PageInfo,
    PageRequest,
    SortOrder,
    TargetKind,
    TopicName,
    TopicSlug,
    VoteCounts,
    VoteDirection,
    VoteTarget,
    normalize_slug,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "TopicId",
    "VoteId",
    # Types
    "Author",
    "AuthenticatedUser",
    "PageInfo",
    "PageRequest",
    "SortOrder",
    "TargetKind",
    "TopicName",
    "TopicSlug",
    "VoteCounts",
    "VoteDirection",
    "VoteTarget",
    "normalize_slug",
]
