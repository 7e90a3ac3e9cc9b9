from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class ChatSummary:
    conversation_id: UUID
    other_user_id: UUID
    last_message: str | None
    last_message_at: datetime
    has_unread: bool
