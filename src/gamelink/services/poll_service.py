from __future__ import annotations

from gamelink.application.dto.poll import PollView
from gamelink.application.exceptions import NotFoundError
from gamelink.application.policies.poll_window import is_poll_active
from gamelink.application.ports.clock import Clock
from gamelink.application.uow import UnitOfWork
from gamelink.domain.value_objects.enums import PollStatus


async def list_polls(uow: UnitOfWork, clock: Clock) -> list[PollView]:
    now = clock.now()
    polls = await uow.polls.list_published()
    return [PollView(poll=p, is_active=is_poll_active(p, now)) for p in polls]


async def get_poll(slug: str, uow: UnitOfWork, clock: Clock) -> PollView:
    poll = await uow.polls.get_by_slug(slug)
    if poll is None or poll.status != PollStatus.PUBLISHED:
        raise NotFoundError("Poll not found")
    return PollView(poll=poll, is_active=is_poll_active(poll, clock.now()))
