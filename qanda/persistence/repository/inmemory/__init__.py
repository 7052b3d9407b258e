"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .question import InMemoryQuestionRepository
from .store import InMemoryStore
from .topic import InMemoryTopicRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryStore",
    "InMemoryAnswerRepository",
    "InMemoryQuestionRepository",
    "InMemoryTopicRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
