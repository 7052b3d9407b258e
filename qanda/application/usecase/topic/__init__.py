"""Topic use cases."""

from .create_topic import CreateTopicRequest, CreateTopicUseCase
from .get_topic import (
    GetTopicRequest,
    GetTopicResponse,
    GetTopicUseCase,
    TopicWithQuestions,
)
from .list_topics import ListTopicsRequest, ListTopicsUseCase

__all__ = [
    "CreateTopicRequest",
    "CreateTopicUseCase",
    "GetTopicRequest",
    "GetTopicResponse",
    "GetTopicUseCase",
    "TopicWithQuestions",
    "ListTopicsRequest",
    "ListTopicsUseCase",
]
