"""Reconciles last messages against read markers.

The count is conversation-grained: the store keeps a single last message per
conversation, so "unread" means "the latest message is from someone else and
is newer than my marker".
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from gamelink.domain.entities.conversation import Conversation
from gamelink.domain.entities.last_message import LastMessage
from gamelink.domain.entities.read_marker import ReadMarker


def build_read_lookup(markers: Iterable[ReadMarker]) -> dict[UUID, datetime | None]:
    """Map conversation id to its read instant.

    A key that is present with a None value means a marker exists but its
    timestamp is not a valid instant.
    """
    lookup: dict[UUID, datetime | None] = {}
    for marker in markers:
        current = lookup.get(marker.conversation_id)
        if marker.conversation_id not in lookup or current is None:
            lookup[marker.conversation_id] = marker.last_read_at
        elif marker.last_read_at is not None and marker.last_read_at > current:
            lookup[marker.conversation_id] = marker.last_read_at
    return lookup


def is_unread(
    user_id: UUID,
    message: LastMessage,
    *,
    has_marker: bool,
    last_read_at: datetime | None,
) -> bool:
    if message.sender_id == user_id:
        return False
    if not has_marker:
        return True
    if message.created_at is None or last_read_at is None:
        # indeterminate
        return False
    return message.created_at > last_read_at


def compute_unread_count(
    user_id: UUID,
    conversations: Iterable[Conversation],
    last_messages: Iterable[LastMessage],
    read_markers: Iterable[ReadMarker],
) -> int:
    """Count the user's conversations holding an unseen message from the other side."""
    active_ids = {c.id for c in conversations}
    lookup = build_read_lookup(read_markers)

    unread: set[UUID] = set()
    for message in last_messages:
        cid = message.conversation_id
        if cid not in active_ids or cid in unread:
            continue
        if is_unread(
            user_id,
            message,
            has_marker=cid in lookup,
            last_read_at=lookup.get(cid),
        ):
            unread.add(cid)
    return len(unread)
