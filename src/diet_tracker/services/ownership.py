"""Caller-is-owner checks shared by mutating services."""

import logging
from uuid import UUID

from diet_tracker.domain.errors import OwnershipViolation

_logger = logging.getLogger(__name__)


def ensure_owner(caller_id: UUID, owner_id: UUID | None, entity: str) -> None:
    """Raise OwnershipViolation unless the caller owns the entity."""
    if owner_id is None or caller_id != owner_id:
        _logger.warning("User %s is not the owner of %s", caller_id, entity)
        raise OwnershipViolation(f"User {caller_id} does not own {entity}")
