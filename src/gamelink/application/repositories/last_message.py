from __future__ import annotations

from collections.abc import Collection
from typing import Protocol
from uuid import UUID

from gamelink.domain.entities.last_message import LastMessage


class LastMessageReader(Protocol):
    async def list_for_conversations(
        self, conversation_ids: Collection[UUID]
    ) -> list[LastMessage]:
        """At most one row per id, in no particular order."""
        ...


class LastMessageWriter(Protocol):
    async def upsert(self, message: LastMessage) -> LastMessage:
        """Replace the conversation's last message. Raises PersistenceError."""
        ...
