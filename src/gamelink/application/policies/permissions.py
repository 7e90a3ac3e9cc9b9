from __future__ import annotations

from gamelink.application.dto.principal import Principal
from gamelink.application.exceptions import ForbiddenError, NotFoundError
from gamelink.domain.entities.conversation import Conversation


def assert_conversation_access(
    principal: Principal,
    conversation: Conversation | None,
) -> Conversation:
    """Raise if conversation doesn't exist or principal is not one of its two users."""
    if conversation is None:
        raise NotFoundError("Conversation not found")

    if not conversation.has_participant(principal.subject_id):
        raise ForbiddenError("Not a participant of this conversation")

    return conversation


def assert_conversation_active(conversation: Conversation) -> None:
    if not conversation.is_active:
        raise ForbiddenError("Conversation is no longer active")
