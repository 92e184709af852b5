# buddy_tracker/models/__init__.py
from .field_types import FieldType
from .pet import Pet
from .tracker import Tracker, FormOption
from .entry import Entry, EntryData, EntryImage

__all__ = [
    'FieldType',
    'Pet',
    'Tracker', 'FormOption',
    'Entry', 'EntryData', 'EntryImage'
]
