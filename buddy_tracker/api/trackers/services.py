# buddy_tracker/api/trackers/services.py
import logging
from typing import Dict, Any, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from buddy_tracker.core.exceptions import NotFoundError
from buddy_tracker.extensions import db
from buddy_tracker.models import Tracker, FormOption
from buddy_tracker.services import cascade

logger = logging.getLogger(__name__)


class TrackerService:
    """사용자 정의 트래커(필드 스키마)와 그 옵션을 관리하는 서비스."""

    @property
    def session(self):
        return db.session

    def list_trackers(self, pet_id: Optional[str] = None) -> List[Tracker]:
        """최근 생성 순(id 내림차순)으로 트래커를 반환합니다. pet_id가 주어지면 해당 반려동물만."""
        stmt = select(Tracker).options(selectinload(Tracker.options)).order_by(Tracker.id.desc())
        if pet_id:
            stmt = stmt.where(Tracker.pet_id == pet_id)
        return list(self.session.scalars(stmt))

    def get_tracker(self, tracker_id: int) -> Tracker:
        stmt = (
            select(Tracker)
            .where(Tracker.id == tracker_id)
            .options(selectinload(Tracker.options), selectinload(Tracker.pet))
        )
        tracker = self.session.scalars(stmt).first()
        if tracker is None:
            raise NotFoundError("Tracker not found")
        return tracker

    def create_tracker(self, tracker_data: Dict[str, Any]) -> Tracker:
        """트래커와 옵션 행들을 한 번에 생성합니다."""
        tracker = Tracker(
            name=tracker_data['name'],
            pet_id=tracker_data['pet_id'],
            options=[
                FormOption(field_name=opt['field_name'], field_type=opt['field_type'])
                for opt in tracker_data['options']
            ]
        )
        try:
            self.session.add(tracker)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(f"Tracker {tracker.id} created for pet {tracker.pet_id} with {len(tracker.options)} options")
        return tracker

    def update_tracker(self, tracker_id: int, update_data: Dict[str, Any]) -> Tracker:
        """
        이름과 옵션을 각각 독립적으로 갱신합니다.
        옵션은 기존 행을 모두 삭제한 뒤 새로 생성하므로 옵션 id는 유지되지 않습니다.
        이미 작성된 기록의 값은 그대로 남습니다.
        """
        tracker = self.session.get(Tracker, tracker_id)
        if tracker is None:
            raise NotFoundError("Tracker not found")

        try:
            if update_data.get('name'):
                tracker.name = update_data['name']

            options = update_data.get('options')
            if options is not None:
                self.session.execute(delete(FormOption).where(FormOption.tracker_id == tracker_id))
                self.session.add_all([
                    FormOption(tracker_id=tracker_id, field_name=opt['field_name'], field_type=opt['field_type'])
                    for opt in options
                ])
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        # 삭제/생성된 옵션이 반영되도록 관계를 다시 읽어옵니다.
        self.session.expire(tracker)
        logger.info(f"Tracker {tracker_id} updated with fields: {list(update_data.keys())}")
        return tracker

    def delete_tracker(self, tracker_id: int) -> None:
        """트래커, 옵션, 기록(값/이미지 포함)을 하나의 트랜잭션으로 삭제합니다."""
        if self.session.get(Tracker, tracker_id) is None:
            raise NotFoundError("Tracker not found")
        try:
            cascade.delete_trackers(self.session, [tracker_id])
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(f"Tracker {tracker_id} deleted")
