# buddy_tracker/models/tracker.py
from buddy_tracker.extensions import db

class Tracker(db.Model):
    """사용자가 정의한 필드 묶음(스키마). 하나의 반려동물에 속합니다."""
    __tablename__ = 'trackers'
    # 삭제된 id가 재사용되지 않도록 AUTOINCREMENT를 사용합니다.
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)
    pet_id = db.Column(db.String(36), db.ForeignKey('pets.pet_id', ondelete='CASCADE'), nullable=False, index=True)

    pet = db.relationship('Pet', back_populates='trackers')
    options = db.relationship(
        'FormOption',
        back_populates='tracker',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='FormOption.id'
    )
    entries = db.relationship(
        'Entry',
        back_populates='tracker',
        cascade='all, delete-orphan',
        passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Tracker {self.id} {self.name}>"


class FormOption(db.Model):
    """트래커 안의 필드 정의 하나 (필드명 + 필드 타입)."""
    __tablename__ = 'form_options'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    field_name = db.Column(db.String, nullable=False)
    field_type = db.Column(db.String, nullable=False)
    tracker_id = db.Column(db.Integer, db.ForeignKey('trackers.id', ondelete='CASCADE'), nullable=False, index=True)

    tracker = db.relationship('Tracker', back_populates='options')
