from __future__ import annotations

from contextlib import asynccontextmanager
from types import TracebackType
from typing import AsyncIterator, Self

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gamelink.application.exceptions import PersistenceError
from gamelink.infrastructure.db.repositories.conversation import (
    ConversationReaderRepo,
    ConversationWriterRepo,
)
from gamelink.infrastructure.db.repositories.last_message import (
    LastMessageReaderRepo,
    LastMessageWriterRepo,
)
from gamelink.infrastructure.db.repositories.poll import PollReaderRepo
from gamelink.infrastructure.db.repositories.read_marker import (
    ReadMarkerReaderRepo,
    ReadMarkerWriterRepo,
)
from gamelink.infrastructure.db.session import AsyncSessionLocal


class SqlAlchemyUoW:
    """Concrete Unit-of-Work backed by a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.conversations = ConversationReaderRepo(session)
        self.conversations_w = ConversationWriterRepo(session)
        self.last_messages = LastMessageReaderRepo(session)
        self.last_messages_w = LastMessageWriterRepo(session)
        self.read_markers = ReadMarkerReaderRepo(session)
        self.read_markers_w = ReadMarkerWriterRepo(session)
        self.polls = PollReaderRepo(session)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to save changes") from exc

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()


@asynccontextmanager
async def open_uow() -> AsyncIterator[SqlAlchemyUoW]:
    """A fresh session-scoped UoW, for fetches that run side by side."""
    async with AsyncSessionLocal() as session:
        async with SqlAlchemyUoW(session) as uow:
            yield uow
