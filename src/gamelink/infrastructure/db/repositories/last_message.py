from __future__ import annotations

from collections.abc import Collection
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gamelink.application.exceptions import PersistenceError
from gamelink.domain.entities.last_message import LastMessage
from gamelink.infrastructure.db.mappers import last_message as mapper
from gamelink.infrastructure.db.models.chat_message import ChatMessageModel


class LastMessageReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_conversations(
        self,
        conversation_ids: Collection[UUID],
    ) -> list[LastMessage]:
        if not conversation_ids:
            return []
        stmt = select(ChatMessageModel).where(
            ChatMessageModel.match_id.in_(list(conversation_ids)),
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class LastMessageWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert(self, message: LastMessage) -> LastMessage:
        values = mapper.entity_to_values(message)
        stmt = (
            pg_insert(ChatMessageModel)
            .values(**values)
            .on_conflict_do_update(
                constraint="uq_chat_messages_match",
                set_={
                    "sender_id": values["sender_id"],
                    "content": values["content"],
                    "created_at": values["created_at"],
                },
            )
            .returning(ChatMessageModel)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to save last message") from exc
        return mapper.model_to_entity(result.scalar_one())
