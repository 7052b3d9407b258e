"""Parsing of the itemId/itemType query pair."""

from typing import Optional
from uuid import UUID

from qanda.domain.error import ValidationError
from qanda.domain.value import TargetKind, VoteTarget


def parse_target(
    item_id: Optional[str], item_type: Optional[str], missing_message: str
) -> VoteTarget:
    """Build a vote target from raw query values.

    Args:
        item_id: Raw item ID
        item_type: Raw item type, "question" or "answer"
        missing_message: Error message when the type is absent or unknown

    Raises:
        ValidationError: If either value is missing or malformed
    """
    try:
        kind = TargetKind(item_type)
    except ValueError:
        raise ValidationError(missing_message)

    if not item_id:
        raise ValidationError(missing_message)

    try:
        return VoteTarget(kind=kind, id=UUID(item_id))
    except ValueError:
        raise ValidationError("Invalid itemId", details={"itemId": item_id})
