from __future__ import annotations

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from gamelink.domain.entities.conversation import Conversation
from gamelink.infrastructure.db.mappers import conversation as mapper
from gamelink.infrastructure.db.models.match import MatchModel


class ConversationReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, conversation_id: UUID) -> Conversation | None:
        result = await self._session.get(MatchModel, conversation_id)
        return mapper.model_to_entity(result) if result else None

    async def list_active_for_user(self, user_id: UUID) -> list[Conversation]:
        stmt = select(MatchModel).where(
            or_(MatchModel.user1_id == user_id, MatchModel.user2_id == user_id),
            MatchModel.is_active.is_(True),
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class ConversationWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, conversation: Conversation) -> Conversation:
        model = mapper.entity_to_model(conversation)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
