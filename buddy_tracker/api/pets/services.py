# buddy_tracker/api/pets/services.py
import logging
from typing import Dict, Any, List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from buddy_tracker.core.exceptions import NotFoundError
from buddy_tracker.extensions import db
from buddy_tracker.models import Pet, Tracker
from buddy_tracker.services import cascade
from buddy_tracker.utils.datetime_utils import DateTimeUtils

class PetService:
    """반려동물 프로필의 생성/조회/수정/삭제를 전담하는 서비스."""
    def __init__(self):
        logging.info("PetService initialized.")

    @property
    def session(self):
        return db.session

    def list_pets(self) -> List[Pet]:
        """최근 수정된 순서로 모든 반려동물을 반환합니다."""
        stmt = select(Pet).order_by(Pet.last_modified.desc())
        return list(self.session.scalars(stmt))

    def get_pet(self, pet_id: str) -> Pet:
        """반려동물 하나를 트래커와 옵션까지 함께 조회합니다."""
        stmt = (
            select(Pet)
            .where(Pet.pet_id == pet_id)
            .options(selectinload(Pet.trackers).selectinload(Tracker.options))
        )
        pet = self.session.scalars(stmt).first()
        if pet is None:
            raise NotFoundError("Pet not found")
        return pet

    def create_pet(self, pet_data: Dict[str, Any]) -> Pet:
        new_pet = Pet(**pet_data)
        try:
            self.session.add(new_pet)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logging.info(f"Pet created: {new_pet.pet_id} ({new_pet.name})")
        return new_pet

    def update_pet(self, pet_id: str, update_data: Dict[str, Any]) -> Pet:
        """전달된 필드만 갱신합니다. 값 변경 여부와 관계없이 last_modified를 갱신합니다."""
        pet = self.session.get(Pet, pet_id)
        if pet is None:
            raise NotFoundError("Pet not found")

        for key, value in update_data.items():
            setattr(pet, key, value)
        pet.last_modified = DateTimeUtils.now()
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logging.info(f"Pet {pet_id} updated with fields: {list(update_data.keys())}")
        return pet

    def delete_pet(self, pet_id: str) -> None:
        """반려동물과 그에 딸린 트래커/옵션/기록을 하나의 트랜잭션으로 삭제합니다."""
        if self.session.get(Pet, pet_id) is None:
            raise NotFoundError("Pet not found")
        try:
            cascade.delete_pet(self.session, pet_id)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logging.info(f"Pet {pet_id} deleted")
