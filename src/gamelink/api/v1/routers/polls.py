from __future__ import annotations

from fastapi import APIRouter

from gamelink.api.deps import ClockDep, UoWDep
from gamelink.api.v1.schemas.poll import PollResponse
from gamelink.services import poll_service

router = APIRouter(prefix="/api/v1/polls", tags=["polls"])


@router.get("", response_model=list[PollResponse])
async def list_polls(uow: UoWDep, clock: ClockDep) -> list[PollResponse]:
    views = await poll_service.list_polls(uow, clock)
    return [PollResponse.from_view(v) for v in views]


@router.get("/{slug}", response_model=PollResponse)
async def get_poll(slug: str, uow: UoWDep, clock: ClockDep) -> PollResponse:
    view = await poll_service.get_poll(slug, uow, clock)
    return PollResponse.from_view(view)
