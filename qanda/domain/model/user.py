"""User entity.

Users are owned by the external identity provider; this service keeps a
profile copy so authors and voters can be displayed.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qanda.domain.model.common import DomainModel, utcnow
from qanda.domain.value import Author, UserId


class User(DomainModel):
    """User profile."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(default="", max_length=255)
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def to_author(self) -> Author:
        """Public identity for display next to content."""
        return Author(id=self.id, name=self.name, email=self.email, image=self.image)
