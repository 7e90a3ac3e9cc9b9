from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter

from gamelink.api.deps import (
    ClockDep,
    CurrentPrincipal,
    OptionalPrincipal,
    UoWDep,
    UoWFactoryDep,
)
from gamelink.api.v1.schemas.chat import (
    ChatSummaryResponse,
    LastMessageResponse,
    LogMessageRequest,
    LogMessageResponse,
    MarkReadRequest,
    UnreadCountResponse,
)
from gamelink.api.v1.schemas.common import OkResponse
from gamelink.application.exceptions import BadRequestError
from gamelink.services import chat_service, message_service, read_marker_service, unread_service

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


def _parse_conversation_id(raw: str | None) -> UUID:
    if raw is None or not raw.strip():
        raise BadRequestError("Missing conversationId")
    try:
        return UUID(raw.strip())
    except ValueError as exc:
        raise BadRequestError("Invalid conversationId") from exc


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    principal: OptionalPrincipal,
    uow_factory: UoWFactoryDep,
) -> UnreadCountResponse:
    count = await unread_service.get_unread_count(principal, uow_factory)
    return UnreadCountResponse(count=count)


@router.post("/mark-read", response_model=OkResponse)
async def mark_read(
    principal: CurrentPrincipal,
    uow: UoWDep,
    clock: ClockDep,
    body: MarkReadRequest | None = None,
) -> OkResponse:
    conversation_id = _parse_conversation_id(body.conversation_id if body else None)
    await read_marker_service.mark_read(conversation_id, principal, uow, clock)
    return OkResponse()


@router.post("/messages", response_model=LogMessageResponse, status_code=201)
async def log_message(
    principal: CurrentPrincipal,
    uow: UoWDep,
    clock: ClockDep,
    body: LogMessageRequest | None = None,
) -> LogMessageResponse:
    conversation_id = _parse_conversation_id(body.conversation_id if body else None)
    message = await message_service.record_last_message(
        conversation_id,
        principal,
        body.content if body else None,
        uow,
        clock,
    )
    return LogMessageResponse(message=LastMessageResponse.from_entity(message))


@router.get("/conversations", response_model=list[ChatSummaryResponse])
async def list_conversations(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[ChatSummaryResponse]:
    chats = await chat_service.list_chats(principal, uow)
    return [ChatSummaryResponse.from_dto(c) for c in chats]
