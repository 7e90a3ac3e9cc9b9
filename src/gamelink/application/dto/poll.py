from __future__ import annotations

from dataclasses import dataclass

from gamelink.domain.entities.poll import Poll


@dataclass(frozen=True, slots=True)
class PollView:
    poll: Poll
    is_active: bool
