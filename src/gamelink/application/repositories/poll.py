from __future__ import annotations

from typing import Protocol

from gamelink.domain.entities.poll import Poll


class PollReader(Protocol):
    async def list_published(self) -> list[Poll]: ...

    async def get_by_slug(self, slug: str) -> Poll | None: ...
