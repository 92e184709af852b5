# buddy_tracker/api/entries/schemas.py
from marshmallow import Schema, fields, validate, pre_load

from buddy_tracker.api.schemas import RequestSchema, iso_datetime
from buddy_tracker.api.trackers.schemas import TrackerResponseSchema

class EntryDataSchema(RequestSchema):
    """
    기록 값 하나. 모든 값은 문자열 그대로 저장됩니다.
    fieldType은 트래커 옵션과 달리 FieldType 목록으로 검사하지 않습니다.
    """
    field_name = fields.Str(required=True, data_key='fieldName')
    field_type = fields.Str(required=True, data_key='fieldType')
    field_value = fields.Str(required=True, data_key='fieldValue')

class EntryImageSchema(RequestSchema):
    url = fields.Str(required=True, validate=validate.Length(min=1))

class EntryCreateSchema(RequestSchema):
    """POST /entries 요청 본문 스키마."""
    tracker_id = fields.Int(required=True, strict=False, data_key='trackerId')
    pet_id = fields.Str(required=True, data_key='petId')
    data = fields.List(fields.Nested(EntryDataSchema), required=True)
    images = fields.List(fields.Nested(EntryImageSchema))

class EntryUpdateSchema(RequestSchema):
    """
    PATCH /entries/<entry_id> 부분 업데이트 스키마.
    data/images가 주어지면 기존 행을 모두 지우고 새로 만듭니다 (병합 없음).
    """
    tracker_id = fields.Int(strict=False, data_key='trackerId', load_only=True)
    pet_id = fields.Str(data_key='petId', load_only=True)
    data = fields.List(fields.Nested(EntryDataSchema))
    images = fields.List(fields.Nested(EntryImageSchema))

class EntriesQuerySchema(RequestSchema):
    """GET /entries 쿼리 파라미터 검증 스키마."""
    tracker_id = fields.Int(data_key='trackerId')

    @pre_load
    def drop_empty_values(self, data, **kwargs):
        """값이 빈 쿼리 파라미터(?trackerId=)는 전달되지 않은 것으로 취급합니다."""
        return {key: value for key, value in dict(data).items() if value != ''}

class EntryDataResponseSchema(Schema):
    id = fields.Int()
    entry_id = fields.Int(data_key='entryId')
    field_name = fields.Str(data_key='fieldName')
    field_type = fields.Str(data_key='fieldType')
    field_value = fields.Str(data_key='fieldValue')

class EntryImageResponseSchema(Schema):
    id = fields.Int()
    entry_id = fields.Int(data_key='entryId')
    url = fields.Str()

class EntryResponseSchema(Schema):
    """기록 + 값 + 이미지 응답 스키마."""
    id = fields.Int()
    tracker_id = fields.Int(data_key='trackerId')
    pet_id = fields.Str(data_key='petId')
    created_at = iso_datetime('created_at', 'createdAt')
    data = fields.List(fields.Nested(EntryDataResponseSchema))
    images = fields.List(fields.Nested(EntryImageResponseSchema))

class EntryDetailResponseSchema(EntryResponseSchema):
    """GET /entries/<entry_id> 응답 스키마. 필드 메타데이터 표시를 위해 트래커와 옵션을 포함합니다."""
    tracker = fields.Nested(TrackerResponseSchema)
