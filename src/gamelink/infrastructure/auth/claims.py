from __future__ import annotations

from typing import Any
from uuid import UUID

from gamelink.application.dto.principal import Principal


def principal_from_claims(payload: dict[str, Any]) -> Principal:
    """Build a Principal from decoded JWT claims. ``sub`` must be a user UUID."""
    return Principal(
        subject_id=UUID(str(payload["sub"])),
        email=payload.get("email"),
    )
