# buddy_tracker/api/trackers/schemas.py
from marshmallow import Schema, fields, validate

from buddy_tracker.api.schemas import RequestSchema
from buddy_tracker.api.pets.schemas import PetResponseSchema
from buddy_tracker.models import FieldType

class FormOptionSchema(RequestSchema):
    """트래커의 필드 정의 하나. 타입은 등록된 FieldType 값만 허용합니다."""
    field_name = fields.Str(
        required=True,
        data_key='fieldName',
        validate=validate.Length(min=1, error="Field name is required")
    )
    field_type = fields.Str(
        required=True,
        data_key='fieldType',
        validate=validate.OneOf(FieldType.values())
    )

_options_field = dict(
    validate=validate.Length(min=1, error="At least one field is required")
)

class TrackerCreateSchema(RequestSchema):
    """POST /trackers 요청 본문 스키마."""
    name = fields.Str(required=True, validate=validate.Length(min=1, error="Tracker name is required"))
    # 반려동물 존재 여부는 저장소의 외래 키 제약에 맡깁니다.
    pet_id = fields.Str(required=True, data_key='petId', validate=validate.Length(min=1, error="Pet is required"))
    options = fields.List(fields.Nested(FormOptionSchema), required=True, **_options_field)

class TrackerUpdateSchema(RequestSchema):
    """
    PATCH /trackers/<tracker_id> 부분 업데이트 스키마.
    petId는 편집 폼이 함께 보내더라도 받아들이기만 하고 반영하지 않습니다.
    """
    name = fields.Str(validate=validate.Length(min=1, error="Tracker name is required"))
    pet_id = fields.Str(data_key='petId', load_only=True)
    options = fields.List(fields.Nested(FormOptionSchema), **_options_field)

class FormOptionResponseSchema(Schema):
    id = fields.Int()
    field_name = fields.Str(data_key='fieldName')
    field_type = fields.Str(data_key='fieldType')
    tracker_id = fields.Int(data_key='trackerId')

class TrackerResponseSchema(Schema):
    """트래커 + 옵션 목록 응답 스키마."""
    id = fields.Int()
    name = fields.Str()
    pet_id = fields.Str(data_key='petId')
    options = fields.List(fields.Nested(FormOptionResponseSchema))

class TrackerDetailResponseSchema(TrackerResponseSchema):
    """GET /trackers/<tracker_id> 응답 스키마. 상위 반려동물의 요약 정보를 포함합니다."""
    pet = fields.Nested(PetResponseSchema)
