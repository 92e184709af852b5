# buddy_tracker/api/schemas.py
import decimal

from marshmallow import Schema, fields, EXCLUDE

from buddy_tracker.utils.datetime_utils import to_iso

class RequestSchema(Schema):
    """요청 본문 스키마의 기반 클래스. 정의되지 않은 키는 오류 없이 버립니다."""
    class Meta:
        unknown = EXCLUDE

class WholeNumber(fields.Int):
    """
    "3" 같은 숫자 문자열은 정수로 변환하되, 5.7처럼 소수부가 있는 값은 거부하는 정수 필드.
    (fields.Int(strict=False)는 소수를 조용히 잘라냅니다.)
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('strict', False)
        super().__init__(**kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            try:
                number = decimal.Decimal(str(value).strip())
            except decimal.InvalidOperation:
                raise self.make_error('invalid')
            if not number.is_finite() or number != number.to_integral_value():
                raise self.make_error('invalid')
        return super()._deserialize(value, attr, data, **kwargs)

def iso_datetime(attribute: str, data_key: str) -> fields.Function:
    """ORM 객체의 datetime 속성을 'Z' 접미사 ISO 문자열로 직렬화하는 필드를 만듭니다."""
    return fields.Function(lambda obj: to_iso(getattr(obj, attribute)), data_key=data_key, dump_only=True)
