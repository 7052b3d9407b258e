"""Domain model entities for the Q&A service."""

from qanda.domain.model.answer import Answer
from qanda.domain.model.question import Question
from qanda.domain.model.topic import Topic
from qanda.domain.model.user import User
from qanda.domain.model.vote import Vote

__all__ = [
    "User",
    "Topic",
    "Question",
    "Answer",
    "Vote",
]
