from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from gamelink.domain.entities.read_marker import ReadMarker


class ReadMarkerReader(Protocol):
    async def list_for_user(self, user_id: UUID) -> list[ReadMarker]: ...


class ReadMarkerWriter(Protocol):
    async def upsert(
        self,
        conversation_id: UUID,
        user_id: UUID,
        read_at: datetime,
    ) -> None:
        """Insert or move the (conversation, user) marker. Raises PersistenceError."""
        ...
