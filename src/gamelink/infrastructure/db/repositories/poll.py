from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gamelink.domain.entities.poll import Poll
from gamelink.domain.value_objects.enums import PollStatus
from gamelink.infrastructure.db.mappers import poll as mapper
from gamelink.infrastructure.db.models.poll import PollModel


class PollReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_published(self) -> list[Poll]:
        stmt = (
            select(PollModel)
            .where(PollModel.status == PollStatus.PUBLISHED)
            .order_by(PollModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]

    async def get_by_slug(self, slug: str) -> Poll | None:
        stmt = select(PollModel).where(PollModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None
