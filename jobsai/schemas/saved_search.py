from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from jobsai.schemas.common import CamelModel, SuccessResponse


class SavedSearchCreate(CamelModel):
    # Presence is checked by the route so a missing field yields the store's own 400 message.
    user_id: int | None = None
    name: str | None = None
    filters: Any = None


class SavedSearchOut(CamelModel):
    id: int
    name: str
    filters: Any
    created_at: datetime | None = None


class SavedSearchListResponse(CamelModel):
    saved_searches: list[SavedSearchOut] = Field(default_factory=list)


class SavedSearchCreateResponse(SuccessResponse):
    saved_search: SavedSearchOut
