"""Topic entity for categorizing questions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qanda.domain.model.common import DomainModel, utcnow
from qanda.domain.value import TopicId, TopicName, TopicSlug


class Topic(DomainModel):
    """Topic entity.

    Name and slug are each globally unique. Questions are linked to topics
    through a many-to-many association.
    """

    id: TopicId
    name: TopicName
    slug: TopicSlug
    description: Optional[str] = Field(default=None, max_length=200)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
