"""Repository interfaces for the Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from qanda.domain.repository.answer import AnswerRepository
from qanda.domain.repository.question import QuestionRepository
from qanda.domain.repository.topic import TopicRepository
from qanda.domain.repository.user import UserRepository
from qanda.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "TopicRepository",
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
]
