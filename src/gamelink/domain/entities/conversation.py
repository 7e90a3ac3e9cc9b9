from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class Conversation:
    """A match between two users; messages are exchanged inside it."""

    id: UUID
    user1_id: UUID
    user2_id: UUID
    is_active: bool
    created_at: datetime

    def has_participant(self, user_id: UUID) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    def other_participant(self, user_id: UUID) -> UUID:
        return self.user2_id if self.user1_id == user_id else self.user1_id
