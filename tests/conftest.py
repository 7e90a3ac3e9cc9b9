"""Shared test fixtures."""
from __future__ import annotations

import asyncio
import uuid
from collections.abc import Collection
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import AsyncIterator
from uuid import UUID

import pytest

from gamelink.application.dto.principal import Principal
from gamelink.application.exceptions import PersistenceError
from gamelink.application.uow import UoWFactory
from gamelink.domain.entities.conversation import Conversation
from gamelink.domain.entities.last_message import LastMessage
from gamelink.domain.entities.poll import Poll
from gamelink.domain.entities.read_marker import ReadMarker
from gamelink.domain.value_objects.enums import PollStatus

USER_ID = UUID("00000000-0000-4000-8000-000000000042")
EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def at(seconds: int) -> datetime:
    """Instant ``seconds`` after a fixed epoch."""
    return EPOCH + timedelta(seconds=seconds)


@pytest.fixture
def user_principal() -> Principal:
    return Principal(subject_id=USER_ID)


def make_conversation(
    *,
    conversation_id: UUID | None = None,
    user_id: UUID = USER_ID,
    other_id: UUID | None = None,
    is_active: bool = True,
    created_at: datetime | None = None,
) -> Conversation:
    return Conversation(
        id=conversation_id or uuid.uuid4(),
        user1_id=user_id,
        user2_id=other_id or uuid.uuid4(),
        is_active=is_active,
        created_at=created_at or EPOCH,
    )


def make_last_message(
    conversation: Conversation,
    *,
    sender_id: UUID,
    created_at: datetime | None,
    body: str = "gg",
) -> LastMessage:
    return LastMessage(
        conversation_id=conversation.id,
        sender_id=sender_id,
        body=body,
        created_at=created_at,
    )


def make_poll(
    *,
    slug: str = "goty-2025",
    status: PollStatus = PollStatus.PUBLISHED,
    starts_at: datetime | None = None,
    ends_at: datetime | None = None,
) -> Poll:
    return Poll(
        id=uuid.uuid4(),
        slug=slug,
        title=slug.replace("-", " ").title(),
        description=None,
        status=status,
        starts_at=starts_at,
        ends_at=ends_at,
        created_at=EPOCH,
    )


@dataclass
class FixedClock:
    current: datetime = EPOCH

    def now(self) -> datetime:
        return self.current


@dataclass
class FakeConversationReader:
    _store: dict[UUID, Conversation] = field(default_factory=dict)
    fail: bool = False

    async def get_by_id(self, conversation_id: UUID) -> Conversation | None:
        return self._store.get(conversation_id)

    async def list_active_for_user(self, user_id: UUID) -> list[Conversation]:
        if self.fail:
            raise RuntimeError("membership lookup failed")
        return [
            c for c in self._store.values()
            if c.is_active and c.has_participant(user_id)
        ]


@dataclass
class FakeConversationWriter:
    _reader: FakeConversationReader

    async def create(self, conversation: Conversation) -> Conversation:
        self._reader._store[conversation.id] = conversation
        return conversation


@dataclass
class FakeLastMessageReader:
    _messages: dict[UUID, LastMessage] = field(default_factory=dict)
    fail: bool = False

    async def list_for_conversations(
        self, conversation_ids: Collection[UUID]
    ) -> list[LastMessage]:
        if self.fail:
            raise RuntimeError("last message lookup failed")
        return [m for cid, m in self._messages.items() if cid in conversation_ids]


@dataclass
class FakeLastMessageWriter:
    _reader: FakeLastMessageReader
    fail: bool = False

    async def upsert(self, message: LastMessage) -> LastMessage:
        if self.fail:
            raise PersistenceError("Failed to save last message")
        self._reader._messages[message.conversation_id] = message
        return message


@dataclass
class FakeReadMarkerReader:
    _markers: dict[tuple[UUID, UUID], ReadMarker] = field(default_factory=dict)
    fail: bool = False
    delay: float = 0.0

    async def list_for_user(self, user_id: UUID) -> list[ReadMarker]:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise RuntimeError("read marker lookup failed")
        return [m for (_, uid), m in self._markers.items() if uid == user_id]


@dataclass
class FakeReadMarkerWriter:
    _reader: FakeReadMarkerReader
    fail: bool = False
    calls: int = 0

    async def upsert(self, conversation_id: UUID, user_id: UUID, read_at: datetime) -> None:
        self.calls += 1
        if self.fail:
            raise PersistenceError("Failed to mark chat as read")
        self._reader._markers[(conversation_id, user_id)] = ReadMarker(
            conversation_id=conversation_id,
            user_id=user_id,
            last_read_at=read_at,
        )


@dataclass
class FakePollReader:
    _polls: list[Poll] = field(default_factory=list)

    async def list_published(self) -> list[Poll]:
        return [p for p in self._polls if p.status == PollStatus.PUBLISHED]

    async def get_by_slug(self, slug: str) -> Poll | None:
        return next((p for p in self._polls if p.slug == slug), None)


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    conversations: FakeConversationReader = field(default_factory=FakeConversationReader)
    conversations_w: FakeConversationWriter | None = None
    last_messages: FakeLastMessageReader = field(default_factory=FakeLastMessageReader)
    last_messages_w: FakeLastMessageWriter | None = None
    read_markers: FakeReadMarkerReader = field(default_factory=FakeReadMarkerReader)
    read_markers_w: FakeReadMarkerWriter | None = None
    polls: FakePollReader = field(default_factory=FakePollReader)
    commit_fails: bool = False
    _committed: bool = False
    _rolled_back: bool = False

    def __post_init__(self) -> None:
        if self.conversations_w is None:
            self.conversations_w = FakeConversationWriter(self.conversations)
        if self.last_messages_w is None:
            self.last_messages_w = FakeLastMessageWriter(self.last_messages)
        if self.read_markers_w is None:
            self.read_markers_w = FakeReadMarkerWriter(self.read_markers)

    def add_conversation(self, conversation: Conversation) -> Conversation:
        self.conversations._store[conversation.id] = conversation
        return conversation

    def add_last_message(self, message: LastMessage) -> None:
        self.last_messages._messages[message.conversation_id] = message

    def add_read_marker(self, conversation_id: UUID, user_id: UUID, read_at: datetime | None) -> None:
        self.read_markers._markers[(conversation_id, user_id)] = ReadMarker(
            conversation_id=conversation_id,
            user_id=user_id,
            last_read_at=read_at,
        )

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        if self.commit_fails:
            raise PersistenceError("Failed to save changes")
        self._committed = True

    async def rollback(self) -> None:
        self._rolled_back = True


def uow_factory_for(uow: FakeUoW) -> UoWFactory:
    """Every opened unit of work shares the same in-memory state."""

    @asynccontextmanager
    async def _open() -> AsyncIterator[FakeUoW]:
        yield uow

    return _open  # type: ignore[return-value]
