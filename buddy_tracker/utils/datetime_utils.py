# buddy_tracker/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간 처리를 위한 유틸리티 모듈

- 저장되는 모든 시각은 UTC 기준입니다.
- SQLite는 timezone 정보를 보존하지 않으므로, 읽어온 naive datetime은 UTC로 간주합니다.
- API 응답에는 'Z' 접미사가 붙은 ISO 8601 문자열을 사용합니다.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def to_iso_string(dt: Optional[datetime]) -> Optional[str]:
        """datetime 객체를 ISO 포맷 문자열로 변환 (None은 그대로 None)"""
        if dt is None:
            return None
        try:
            if dt.tzinfo is None:
                # timezone-naive인 경우 UTC로 가정
                dt = dt.replace(tzinfo=timezone.utc)
            else:
                dt = dt.astimezone(timezone.utc)

            return dt.isoformat().replace('+00:00', 'Z')

        except Exception as e:
            logger.error(f"ISO 문자열 변환 실패: {dt} - {e}")
            raise ValueError(f"datetime 객체를 ISO 문자열로 변환할 수 없습니다: {dt}")

    @staticmethod
    def to_timestamp_ms(dt: datetime) -> int:
        """
        datetime 객체를 Unix timestamp (밀리초)로 변환

        Args:
            dt: datetime 객체 (naive인 경우 UTC로 간주)

        Returns:
            Unix timestamp in milliseconds
        """
        if not isinstance(dt, datetime):
            raise ValueError(f"datetime 객체여야 합니다: {type(dt)}")

        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return int(dt.timestamp() * 1000)


# 편의를 위한 글로벌 함수들
def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """datetime을 ISO 문자열로 변환"""
    return DateTimeUtils.to_iso_string(dt)
