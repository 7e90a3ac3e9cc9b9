from __future__ import annotations

from typing import Protocol
from uuid import UUID

from gamelink.domain.entities.conversation import Conversation


class ConversationReader(Protocol):
    async def get_by_id(self, conversation_id: UUID) -> Conversation | None: ...

    async def list_active_for_user(self, user_id: UUID) -> list[Conversation]:
        """Active conversations where the user is either participant."""
        ...


class ConversationWriter(Protocol):
    async def create(self, conversation: Conversation) -> Conversation: ...
