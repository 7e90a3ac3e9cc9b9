from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Callable, Protocol

from gamelink.application.repositories.conversation import (
    ConversationReader,
    ConversationWriter,
)
from gamelink.application.repositories.last_message import (
    LastMessageReader,
    LastMessageWriter,
)
from gamelink.application.repositories.poll import PollReader
from gamelink.application.repositories.read_marker import (
    ReadMarkerReader,
    ReadMarkerWriter,
)


class UnitOfWork(Protocol):
    conversations: ConversationReader
    conversations_w: ConversationWriter
    last_messages: LastMessageReader
    last_messages_w: LastMessageWriter
    read_markers: ReadMarkerReader
    read_markers_w: ReadMarkerWriter
    polls: PollReader

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...


# Opens an independent unit of work (own session); used where fetches run concurrently.
UoWFactory = Callable[[], AbstractAsyncContextManager[UnitOfWork]]
