# buddy_tracker/models/pet.py
import uuid

from buddy_tracker.extensions import db
from buddy_tracker.utils.datetime_utils import DateTimeUtils

def _new_pet_id() -> str:
    return str(uuid.uuid4())

class Pet(db.Model):
    """
    'pets' 테이블.
    반려동물의 기본 정보와, 소유한 트래커 목록의 루트가 되는 엔티티.
    """
    __tablename__ = 'pets'

    pet_id = db.Column(db.String(36), primary_key=True, default=_new_pet_id)
    name = db.Column(db.String, nullable=False)
    gender = db.Column(db.String, nullable=False)
    species = db.Column(db.String, nullable=False)
    breed = db.Column(db.String, nullable=False)
    age = db.Column(db.Integer, nullable=False)
    last_modified = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=DateTimeUtils.now,
        onupdate=DateTimeUtils.now
    )

    trackers = db.relationship(
        'Tracker',
        back_populates='pet',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='Tracker.id.desc()'
    )

    def __repr__(self) -> str:
        return f"<Pet {self.pet_id} {self.name}>"
