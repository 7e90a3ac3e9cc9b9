from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class LastMessage:
    conversation_id: UUID
    sender_id: UUID
    body: str
    created_at: datetime | None  # None: stored value is not a valid instant
