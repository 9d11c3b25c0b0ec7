from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.sql import func

from jobsai.database import ON_DEMAND, Base


class SavedSearch(Base):
    __tablename__ = "saved_searches"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(Text, nullable=False)
    # Opaque filter object, JSON-encoded.
    filters = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_saved_searches_user_id", "user_id"),
        {"info": {ON_DEMAND: True}},
    )

    def set_filters(self, filters: Any) -> None:
        self.filters = json.dumps(filters, ensure_ascii=False)

    def get_filters(self) -> Any:
        return json.loads(self.filters) if self.filters else {}
