"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qanda.domain.model.topic import Topic
from qanda.domain.value import QuestionId, TopicId, TopicName, TopicSlug


class TopicRepository(ABC):
    """Repository for Topic entity."""

    @abstractmethod
    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> List[Topic]:
        """Find several topics in one query.

        Args:
            topic_ids: Topic IDs to look up

        Returns:
            The topics that exist
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find a topic by its exact slug.

        Args:
            slug: Topic slug

        Returns:
            The topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name_or_slug(
        self, name: TopicName, slug: TopicSlug
    ) -> Optional[Topic]:
        """Find a topic that already uses this name or this slug.

        Args:
            name: Topic name
            slug: Topic slug

        Returns:
            The first matching topic, None if both are free
        """
        pass

    @abstractmethod
    async def find_all_with_counts(
        self, search: Optional[str] = None, limit: int = 50
    ) -> List[tuple[Topic, int]]:
        """List topics with the number of questions linked to each.

        Ordered by question count descending, then name descending.

        Args:
            search: Case-insensitive substring to match against the name
            limit: Maximum number of topics

        Returns:
            List of (topic, question count) pairs
        """
        pass

    @abstractmethod
    async def count_questions(self, topic_id: TopicId) -> int:
        """Count questions linked to a topic.

        Args:
            topic_id: Topic ID

        Returns:
            Number of linked questions
        """
        pass

    @abstractmethod
    async def find_names_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, List[str]]:
        """Fetch topic names for several questions in one query.

        Args:
            question_ids: Question IDs

        Returns:
            Mapping of question ID to topic names; questions without topics
            are absent from the mapping
        """
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Create a topic.

        Args:
            topic: The topic to save

        Returns:
            The saved topic

        Raises:
            IntegrityError: If the name or slug is already taken
        """
        pass
