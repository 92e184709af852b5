# buddy_tracker/models/entry.py
from buddy_tracker.extensions import db
from buddy_tracker.utils.datetime_utils import DateTimeUtils

class Entry(db.Model):
    """
    트래커에 기록된 한 건의 기록.
    pet_id는 트래커의 반려동물을 중복으로 참조합니다.
    """
    __tablename__ = 'entries'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    tracker_id = db.Column(db.Integer, db.ForeignKey('trackers.id', ondelete='CASCADE'), nullable=False, index=True)
    pet_id = db.Column(db.String(36), db.ForeignKey('pets.pet_id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=DateTimeUtils.now)

    tracker = db.relationship('Tracker', back_populates='entries')
    data = db.relationship(
        'EntryData',
        back_populates='entry',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='EntryData.id'
    )
    images = db.relationship(
        'EntryImage',
        back_populates='entry',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='EntryImage.id'
    )


class EntryData(db.Model):
    """
    기록의 필드 값 하나.
    필드명/타입은 작성 시점의 트래커 옵션에서 복사되므로, 이후 옵션이 바뀌어도 유지됩니다.
    """
    __tablename__ = 'entry_data'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    entry_id = db.Column(db.Integer, db.ForeignKey('entries.id', ondelete='CASCADE'), nullable=False, index=True)
    field_name = db.Column(db.String, nullable=False)
    field_type = db.Column(db.String, nullable=False)
    field_value = db.Column(db.Text, nullable=False, default='')

    entry = db.relationship('Entry', back_populates='data')


class EntryImage(db.Model):
    __tablename__ = 'entry_images'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    entry_id = db.Column(db.Integer, db.ForeignKey('entries.id', ondelete='CASCADE'), nullable=False, index=True)
    url = db.Column(db.String, nullable=False)

    entry = db.relationship('Entry', back_populates='images')
