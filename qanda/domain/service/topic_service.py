"""Topic domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from qanda.domain.error import ConflictError, ValidationError
from qanda.domain.model import Topic
from qanda.domain.repository import TopicRepository
from qanda.domain.value import TopicId, TopicName, TopicSlug

from .base import Service

TOPIC_CONFLICT_MESSAGE = "Topic with this name or slug already exists"


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def validate_topics_exist(self, topic_ids: Sequence[TopicId]) -> list[Topic]:
        """Validate that all requested topics exist.

        Args:
            topic_ids: Topic IDs to validate

        Returns:
            List of found topics

        Raises:
            ValidationError: If any topics are not found
        """
        if not topic_ids:
            return []

        with logfire.span(
            "topic_service.validate_topics_exist",
            topic_ids=[str(t) for t in topic_ids],
        ):
            topics = await self.topic_repository.find_by_ids(topic_ids)

            found = {topic.id for topic in topics}
            missing = [str(tid) for tid in topic_ids if tid not in found]

            if missing:
                logfire.warn("Unknown topics requested", topic_ids=missing)
                raise ValidationError(
                    f"Topics not found: {', '.join(sorted(missing))}",
                    details={"topicIds": missing},
                )

            logfire.info("All topics validated", count=len(topics))
            return topics

    async def list_topics(
        self, search: Optional[str] = None, limit: int = 50
    ) -> list[tuple[Topic, int]]:
        """List topics with their question counts.

        Args:
            search: Case-insensitive substring of the name
            limit: Maximum number of topics

        Returns:
            List of (topic, question count), most used first
        """
        with logfire.span("topic_service.list_topics", search=search, limit=limit):
            topics = await self.topic_repository.find_all_with_counts(
                search=search.strip() if search else None, limit=limit
            )
            logfire.info("Topics retrieved", count=len(topics))
            return topics

    async def get_topic_by_slug(self, slug: str) -> Topic | None:
        """Get a topic by its exact slug.

        Args:
            slug: Slug as received from the caller

        Returns:
            Topic if found, None otherwise (including malformed slugs)
        """
        with logfire.span("topic_service.get_topic_by_slug", slug=slug):
            try:
                topic_slug = TopicSlug(slug)
            except ValueError:
                logfire.warn("Malformed topic slug", slug=slug)
                return None

            topic = await self.topic_repository.find_by_slug(topic_slug)
            if topic:
                logfire.info("Topic found", slug=slug)
            else:
                logfire.warn("Topic not found", slug=slug)
            return topic

    async def count_questions(self, topic_id: TopicId) -> int:
        """Number of questions linked to a topic."""
        return await self.topic_repository.count_questions(topic_id)

    async def create_topic(
        self,
        name: str,
        slug: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Topic:
        """Create a topic.

        The name is trimmed and lowercased. The slug is normalized the same
        way with whitespace runs turned into hyphens, and is derived from
        the name when not given.

        Args:
            name: Topic name as entered
            slug: Optional slug as entered
            description: Optional description

        Returns:
            Created topic

        Raises:
            ValidationError: If the normalized name or slug is empty or too long
            ConflictError: If the name or slug is already taken
        """
        with logfire.span("topic_service.create_topic", name=name, slug=slug):
            try:
                topic_name = TopicName.from_text(name)
                topic_slug = TopicSlug.from_text(slug if slug is not None else name)
                topic = Topic(
                    id=TopicId(uuid4()),
                    name=topic_name,
                    slug=topic_slug,
                    description=description or None,
                )
            except ValueError as e:
                raise ValidationError("Invalid topic", details=str(e))

            existing = await self.topic_repository.find_by_name_or_slug(
                topic_name, topic_slug
            )
            if existing:
                logfire.warn(
                    "Topic already exists",
                    name=topic_name.root,
                    slug=topic_slug.root,
                    existing_id=str(existing.id),
                )
                raise ConflictError(TOPIC_CONFLICT_MESSAGE)

            try:
                saved = await self.topic_repository.save(topic)
            except IntegrityError:
                # Lost a race with a concurrent create
                logfire.warn("Topic insert rejected as duplicate", slug=topic_slug.root)
                raise ConflictError(TOPIC_CONFLICT_MESSAGE)

            logfire.info("Topic created", topic_id=str(saved.id), slug=saved.slug.root)
            return saved
