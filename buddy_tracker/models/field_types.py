# buddy_tracker/models/field_types.py
from enum import Enum
from typing import List

class FieldType(Enum):
    """
    트래커 양식 필드가 가질 수 있는 타입 목록.
    값은 모두 텍스트로 저장되며, 해석(날짜/숫자/이미지 URL)은 클라이언트가 담당합니다.
    """
    TEXT = "Text"
    DATE = "Date"
    DECIMAL = "Decimal"
    INTEGER = "Integer"
    IMAGE = "Image"

    @classmethod
    def values(cls) -> List[str]:
        """검증기에서 사용할 허용 문자열 목록을 반환합니다."""
        return [member.value for member in cls]
