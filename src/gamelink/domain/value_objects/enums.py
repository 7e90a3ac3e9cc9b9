from __future__ import annotations

from enum import StrEnum


class PollStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
