# buddy_tracker/api/entries/services.py
import logging
from typing import Dict, Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from buddy_tracker.core.exceptions import NotFoundError
from buddy_tracker.extensions import db
from buddy_tracker.models import Entry, EntryData, EntryImage, Tracker
from buddy_tracker.services import cascade

logger = logging.getLogger(__name__)


def _build_data(rows: List[Dict[str, Any]]) -> List[EntryData]:
    return [
        EntryData(field_name=row['field_name'], field_type=row['field_type'], field_value=row['field_value'])
        for row in rows
    ]

def _build_images(rows: List[Dict[str, Any]]) -> List[EntryImage]:
    return [EntryImage(url=row['url']) for row in rows]


class EntryService:
    """트래커에 기록되는 기록(값/이미지 포함)의 생성과 조회를 전담하는 서비스."""

    @property
    def session(self):
        return db.session

    def list_entries(self, tracker_id: Optional[int] = None) -> List[Entry]:
        """최신 기록부터 반환합니다. tracker_id가 주어지면 해당 트래커만."""
        stmt = (
            select(Entry)
            .options(selectinload(Entry.data), selectinload(Entry.images))
            .order_by(Entry.created_at.desc(), Entry.id.desc())
        )
        if tracker_id is not None:
            stmt = stmt.where(Entry.tracker_id == tracker_id)
        return list(self.session.scalars(stmt))

    def get_entry(self, entry_id: int) -> Entry:
        stmt = (
            select(Entry)
            .where(Entry.id == entry_id)
            .options(
                selectinload(Entry.data),
                selectinload(Entry.images),
                selectinload(Entry.tracker).selectinload(Tracker.options)
            )
        )
        entry = self.session.scalars(stmt).first()
        if entry is None:
            raise NotFoundError("Entry not found")
        return entry

    def create_entry(self, entry_data: Dict[str, Any]) -> Entry:
        """
        기록과 기록 값들을 한 번에 생성합니다.
        값의 개수나 필드명이 트래커 옵션과 일치하는지는 검사하지 않습니다.
        """
        entry = Entry(
            tracker_id=entry_data['tracker_id'],
            pet_id=entry_data['pet_id'],
            data=_build_data(entry_data['data']),
            images=_build_images(entry_data.get('images', []))
        )
        try:
            self.session.add(entry)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(f"Entry {entry.id} created for tracker {entry.tracker_id} with {len(entry.data)} fields")
        return entry

    def update_entry(self, entry_id: int, update_data: Dict[str, Any]) -> Entry:
        """data와 images는 각각 주어졌을 때만 전체 교체합니다."""
        entry = self.session.get(Entry, entry_id)
        if entry is None:
            raise NotFoundError("Entry not found")

        data = update_data.get('data')
        images = update_data.get('images')
        try:
            if data is not None:
                entry.data = _build_data(data)
            if images is not None:
                entry.images = _build_images(images)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(f"Entry {entry_id} updated with fields: {list(update_data.keys())}")
        return entry

    def delete_entry(self, entry_id: int) -> None:
        if self.session.get(Entry, entry_id) is None:
            raise NotFoundError("Entry not found")
        try:
            cascade.delete_entries(self.session, [entry_id])
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(f"Entry {entry_id} deleted")
