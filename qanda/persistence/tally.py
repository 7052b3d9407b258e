"""Shared vote tally query.

Every place that needs vote counts (single target, batch counts, and the
most_voted feed ordering) builds on ``vote_tally`` so the arithmetic lives
in one query shape served by ``idx_votes_target``.
"""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.selectable import Subquery

from qanda.domain.value import TargetKind, VoteDirection
from qanda.persistence.tables import votes_table


def vote_tally(
    kind: TargetKind, target_ids: Optional[Sequence[UUID]] = None
) -> Subquery:
    """Grouped upvote/downvote counts per target of one kind.

    Args:
        kind: Kind of target to tally
        target_ids: Restrict to these targets (None for all)

    Returns:
        Subquery with columns target_id, upvotes, downvotes
    """
    direction = votes_table.c.direction
    stmt = (
        select(
            votes_table.c.target_id.label("target_id"),
            func.sum(case((direction == VoteDirection.UPVOTE.value, 1), else_=0)).label(
                "upvotes"
            ),
            func.sum(
                case((direction == VoteDirection.DOWNVOTE.value, 1), else_=0)
            ).label("downvotes"),
        )
        .where(votes_table.c.target_kind == kind.value)
        .group_by(votes_table.c.target_id)
    )

    if target_ids is not None:
        stmt = stmt.where(votes_table.c.target_id.in_(target_ids))

    return stmt.subquery(f"{kind.value}_tally")


def net_score(tally: Subquery) -> ColumnElement[int]:
    """Net score column for an outer-joined tally (targets without votes score 0)."""
    return func.coalesce(tally.c.upvotes, 0) - func.coalesce(tally.c.downvotes, 0)
