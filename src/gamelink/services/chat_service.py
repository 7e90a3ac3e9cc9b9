from __future__ import annotations

from gamelink.application.dto.chat import ChatSummary
from gamelink.application.dto.principal import Principal
from gamelink.application.policies.unread import build_read_lookup, is_unread
from gamelink.application.uow import UnitOfWork


async def list_chats(principal: Principal, uow: UnitOfWork) -> list[ChatSummary]:
    """Active conversations of the caller with their last message, newest first."""
    user_id = principal.subject_id
    conversations = await uow.conversations.list_active_for_user(user_id)
    if not conversations:
        return []

    messages = await uow.last_messages.list_for_conversations(
        [c.id for c in conversations],
    )
    by_conversation = {m.conversation_id: m for m in messages}
    lookup = build_read_lookup(await uow.read_markers.list_for_user(user_id))

    chats: list[ChatSummary] = []
    for conversation in conversations:
        message = by_conversation.get(conversation.id)
        has_unread = message is not None and is_unread(
            user_id,
            message,
            has_marker=conversation.id in lookup,
            last_read_at=lookup.get(conversation.id),
        )
        chats.append(
            ChatSummary(
                conversation_id=conversation.id,
                other_user_id=conversation.other_participant(user_id),
                last_message=message.body if message else None,
                last_message_at=(
                    message.created_at
                    if message and message.created_at
                    else conversation.created_at
                ),
                has_unread=has_unread,
            )
        )

    chats.sort(key=lambda c: c.last_message_at, reverse=True)
    return chats
