# buddy_tracker/services/cascade.py
"""
반려동물 → 트래커 → (옵션, 기록 → 기록 값/이미지) 계층의 연쇄 삭제.

저장소의 ON DELETE CASCADE에 기대지 않고, 자식부터 부모 순서로 직접 삭제합니다.
여기의 함수들은 커밋하지 않으므로 호출한 서비스가 하나의 트랜잭션으로 묶어 커밋해야 합니다.
"""
import logging
from typing import List

from sqlalchemy import delete, select, or_
from sqlalchemy.orm import Session

from buddy_tracker.models import Entry, EntryData, EntryImage, FormOption, Tracker, Pet

logger = logging.getLogger(__name__)


def delete_entry_children(session: Session, entry_ids: List[int]) -> None:
    """기록 값과 이미지를 삭제합니다. 기록 자체는 남깁니다."""
    if not entry_ids:
        return
    session.execute(delete(EntryData).where(EntryData.entry_id.in_(entry_ids)))
    session.execute(delete(EntryImage).where(EntryImage.entry_id.in_(entry_ids)))


def delete_entries(session: Session, entry_ids: List[int]) -> None:
    """기록 값, 이미지, 기록 순서로 삭제합니다."""
    if not entry_ids:
        return
    delete_entry_children(session, entry_ids)
    session.execute(delete(Entry).where(Entry.id.in_(entry_ids)))


def delete_trackers(session: Session, tracker_ids: List[int]) -> None:
    """트래커에 달린 기록과 옵션을 먼저 지운 뒤 트래커를 삭제합니다."""
    if not tracker_ids:
        return
    entry_ids = list(session.scalars(select(Entry.id).where(Entry.tracker_id.in_(tracker_ids))))
    delete_entries(session, entry_ids)
    session.execute(delete(FormOption).where(FormOption.tracker_id.in_(tracker_ids)))
    session.execute(delete(Tracker).where(Tracker.id.in_(tracker_ids)))


def delete_pet(session: Session, pet_id: str) -> None:
    """반려동물과 그에 딸린 모든 트래커/옵션/기록을 삭제합니다."""
    tracker_ids = list(session.scalars(select(Tracker.id).where(Tracker.pet_id == pet_id)))
    # 기록은 트래커와 반려동물을 모두 참조하므로 둘 중 하나라도 걸리면 삭제 대상입니다.
    entry_ids = list(session.scalars(
        select(Entry.id).where(or_(Entry.pet_id == pet_id, Entry.tracker_id.in_(tracker_ids)))
    ))
    delete_entries(session, entry_ids)
    delete_trackers(session, tracker_ids)
    session.execute(delete(Pet).where(Pet.pet_id == pet_id))
    logger.info(f"Cascade delete issued for pet {pet_id}: {len(tracker_ids)} trackers, {len(entry_ids)} entries")
