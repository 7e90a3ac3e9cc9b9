from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gamelink.application.exceptions import PersistenceError
from gamelink.domain.entities.read_marker import ReadMarker
from gamelink.infrastructure.db.mappers import read_marker as mapper
from gamelink.infrastructure.db.models.chat_read import ChatReadModel


class ReadMarkerReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_user(self, user_id: UUID) -> list[ReadMarker]:
        stmt = select(ChatReadModel).where(ChatReadModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class ReadMarkerWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert(
        self,
        conversation_id: UUID,
        user_id: UUID,
        read_at: datetime,
    ) -> None:
        stmt = (
            pg_insert(ChatReadModel)
            .values(
                match_id=conversation_id,
                user_id=user_id,
                last_read_at=read_at,
            )
            .on_conflict_do_update(
                constraint="uq_chat_reads_member",
                set_={"last_read_at": read_at},
            )
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to mark chat as read") from exc
