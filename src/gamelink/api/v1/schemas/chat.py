from __future__ import annotations

from datetime import datetime
from uuid import UUID

from gamelink.api.v1.schemas.common import ApiModel
from gamelink.application.dto.chat import ChatSummary
from gamelink.domain.entities.last_message import LastMessage


class UnreadCountResponse(ApiModel):
    count: int


class MarkReadRequest(ApiModel):
    # Checked in the router; absent or blank is a 400.
    conversation_id: str | None = None


class LogMessageRequest(ApiModel):
    conversation_id: str | None = None
    content: str | None = None


class LastMessageResponse(ApiModel):
    conversation_id: UUID
    sender_id: UUID
    body: str
    created_at: datetime | None

    @classmethod
    def from_entity(cls, message: LastMessage) -> LastMessageResponse:
        return cls(
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            body=message.body,
            created_at=message.created_at,
        )


class LogMessageResponse(ApiModel):
    ok: bool = True
    message: LastMessageResponse


class ChatSummaryResponse(ApiModel):
    conversation_id: UUID
    other_user_id: UUID
    last_message: str | None
    last_message_at: datetime
    has_unread: bool

    @classmethod
    def from_dto(cls, chat: ChatSummary) -> ChatSummaryResponse:
        return cls(
            conversation_id=chat.conversation_id,
            other_user_id=chat.other_user_id,
            last_message=chat.last_message,
            last_message_at=chat.last_message_at,
            has_unread=chat.has_unread,
        )
