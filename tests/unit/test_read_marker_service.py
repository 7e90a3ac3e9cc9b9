from __future__ import annotations

import uuid

import pytest

from gamelink.application.dto.principal import Principal
from gamelink.application.exceptions import ForbiddenError, NotFoundError, PersistenceError
from gamelink.services import read_marker_service, unread_service
from tests.conftest import (
    USER_ID,
    FakeUoW,
    FixedClock,
    at,
    make_conversation,
    make_last_message,
    uow_factory_for,
)


@pytest.fixture
def uow_with_unread():
    uow = FakeUoW()
    conv = uow.add_conversation(make_conversation())
    uow.add_last_message(make_last_message(conv, sender_id=conv.user2_id, created_at=at(100)))
    return uow, conv


@pytest.mark.asyncio
async def test_mark_read_creates_marker_at_now(user_principal, uow_with_unread):
    uow, conv = uow_with_unread
    clock = FixedClock(at(150))

    await read_marker_service.mark_read(conv.id, user_principal, uow, clock)

    marker = uow.read_markers._markers[(conv.id, USER_ID)]
    assert marker.last_read_at == at(150)
    assert uow._committed is True
    assert await unread_service.get_unread_count(user_principal, uow_factory_for(uow)) == 0


@pytest.mark.asyncio
async def test_mark_read_twice_converges(user_principal, uow_with_unread):
    uow, conv = uow_with_unread
    clock = FixedClock(at(150))

    await read_marker_service.mark_read(conv.id, user_principal, uow, clock)
    once = await unread_service.get_unread_count(user_principal, uow_factory_for(uow))
    clock.current = at(160)
    await read_marker_service.mark_read(conv.id, user_principal, uow, clock)
    twice = await unread_service.get_unread_count(user_principal, uow_factory_for(uow))

    assert once == twice == 0
    assert len(uow.read_markers._markers) == 1
    assert uow.read_markers._markers[(conv.id, USER_ID)].last_read_at == at(160)


@pytest.mark.asyncio
async def test_mark_read_unknown_conversation(user_principal):
    with pytest.raises(NotFoundError):
        await read_marker_service.mark_read(uuid.uuid4(), user_principal, FakeUoW(), FixedClock())


@pytest.mark.asyncio
async def test_mark_read_rejects_non_participant(uow_with_unread):
    uow, conv = uow_with_unread
    stranger = Principal(subject_id=uuid.uuid4())

    with pytest.raises(ForbiddenError):
        await read_marker_service.mark_read(conv.id, stranger, uow, FixedClock())

    assert uow.read_markers_w.calls == 0


@pytest.mark.asyncio
async def test_mark_read_write_failure_rolls_back(user_principal, uow_with_unread):
    uow, conv = uow_with_unread
    uow.read_markers_w.fail = True

    with pytest.raises(PersistenceError):
        await read_marker_service.mark_read(conv.id, user_principal, uow, FixedClock())

    assert uow._rolled_back is True
    assert uow._committed is False


@pytest.mark.asyncio
async def test_mark_read_commit_failure_reports_mark_read_detail(user_principal, uow_with_unread):
    uow, conv = uow_with_unread
    uow.commit_fails = True

    with pytest.raises(PersistenceError) as exc_info:
        await read_marker_service.mark_read(conv.id, user_principal, uow, FixedClock())

    assert exc_info.value.detail == "Failed to mark chat as read"
    assert uow._rolled_back is True
