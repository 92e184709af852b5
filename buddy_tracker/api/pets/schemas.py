# buddy_tracker/api/pets/schemas.py
from marshmallow import Schema, fields, validate

from buddy_tracker.api.schemas import RequestSchema, WholeNumber, iso_datetime

_required_text = validate.Length(min=1)

class PetCreateSchema(RequestSchema):
    """POST /pets 반려동물 등록 요청 스키마."""
    name = fields.Str(required=True, validate=validate.Length(min=1, error="Name is required"))
    gender = fields.Str(required=True, validate=validate.Length(min=1, error="Gender is required"))
    species = fields.Str(required=True, validate=validate.Length(min=1, error="Species is required"))
    breed = fields.Str(required=True, validate=validate.Length(min=1, error="Breed is required"))
    # "5"처럼 숫자 문자열은 정수로 변환하고, 5.7 같은 소수는 거부합니다.
    age = WholeNumber(required=True, validate=validate.Range(min=0, error="Age must be 0 or greater"))

class PetUpdateSchema(RequestSchema):
    """PATCH /pets/<pet_id> 정보 수정을 위한 스키마 (부분 업데이트용)."""
    name = fields.Str(validate=_required_text)
    gender = fields.Str(validate=_required_text)
    species = fields.Str(validate=_required_text)
    breed = fields.Str(validate=_required_text)
    age = WholeNumber(validate=validate.Range(min=0))

class PetResponseSchema(Schema):
    """반려동물 기본 정보 응답 스키마."""
    pet_id = fields.Str(data_key='petId', dump_only=True)
    name = fields.Str()
    gender = fields.Str()
    species = fields.Str()
    breed = fields.Str()
    age = fields.Int()
    last_modified = iso_datetime('last_modified', 'lastModified')

class PetDetailResponseSchema(PetResponseSchema):
    """GET /pets/<pet_id> 응답 스키마. 트래커와 각 트래커의 옵션을 포함합니다."""
    trackers = fields.List(fields.Nested('TrackerResponseSchema'))
