from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from jobsai.models.saved_search import SavedSearch
from jobsai.schemas.saved_search import SavedSearchOut


logger = logging.getLogger(__name__)


def ensure_saved_searches_table(db: Session) -> None:
    # CREATE TABLE / INDEX IF NOT EXISTS; safe to run on every request.
    SavedSearch.__table__.create(bind=db.get_bind(), checkfirst=True)


def _to_out(record: SavedSearch) -> SavedSearchOut:
    return SavedSearchOut(id=record.id, name=record.name, filters=record.get_filters(), created_at=record.created_at)


def list_saved_searches(db: Session, user_id: int) -> list[SavedSearchOut]:
    records = db.scalars(
        select(SavedSearch)
        .where(SavedSearch.user_id == user_id)
        .order_by(SavedSearch.created_at.desc(), SavedSearch.id.desc())
    ).all()
    return [_to_out(record) for record in records]


def create_saved_search(db: Session, user_id: int, name: str, filters: Any) -> SavedSearchOut:
    record = SavedSearch(user_id=user_id, name=name)
    record.set_filters(filters)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("saved_search.created id=%s user_id=%s", record.id, user_id)
    return _to_out(record)


def delete_saved_search(db: Session, search_id: int, user_id: int) -> int:
    """Delete a saved search owned by `user_id`; returns the number of rows removed."""

    result = db.execute(delete(SavedSearch).where(SavedSearch.id == search_id, SavedSearch.user_id == user_id))
    db.commit()
    return int(result.rowcount or 0)
