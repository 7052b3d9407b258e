"""Domain services."""

from .aggregation_service import AggregationService
from .answer_service import AnswerService
from .base import Service
from .feed_service import AnswerFeedItem, FeedPage, FeedService, QuestionFeedItem
from .jwt_service import JWTService
from .question_service import QuestionService
from .topic_service import TopicService
from .user_service import UserService
from .vote_service import VoteOutcome, VoteService, VoteWithVoter

__all__ = [
    "AggregationService",
    "AnswerFeedItem",
    "AnswerService",
    "FeedPage",
    "FeedService",
    "JWTService",
    "QuestionFeedItem",
    "QuestionService",
    "Service",
    "TopicService",
    "UserService",
    "VoteOutcome",
    "VoteService",
    "VoteWithVoter",
]
