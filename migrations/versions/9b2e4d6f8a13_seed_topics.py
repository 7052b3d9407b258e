"""seed_topics

Revision ID: 9b2e4d6f8a13
Revises: 3f1c9a7d2b64
Create Date: 2026-10-12 14:20:07.552913

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b2e4d6f8a13"
down_revision: Union[str, Sequence[str], None] = "3f1c9a7d2b64"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Names are stored normalized (trimmed, lowercase)
TOPICS = [
    (
        "technology",
        "technology",
        "Discussions about technology, programming, and software development",
    ),
    ("science", "science", "Scientific discussions and discoveries"),
    ("business", "business", "Business, entrepreneurship, and startup discussions"),
    ("arts & culture", "arts-culture", "Arts, literature, music, and cultural topics"),
    ("health", "health", "Health, wellness, and medical discussions"),
]


def upgrade() -> None:
    """Seed initial topics."""
    topics_table = sa.table(
        "topics",
        sa.column("name", sa.String),
        sa.column("slug", sa.String),
        sa.column("description", sa.String),
    )

    op.bulk_insert(
        topics_table,
        [
            {"name": name, "slug": slug, "description": description}
            for name, slug, description in TOPICS
        ],
    )


def downgrade() -> None:
    """Remove seeded topics."""
    op.execute(
        """
        DELETE FROM topics WHERE slug IN (
            'technology', 'science', 'business', 'arts-culture', 'health'
        )
        """
    )
