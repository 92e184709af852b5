# buddy_tracker/core/exceptions.py
"""
API 계층에서 HTTP 상태 코드로 변환되는 도메인 예외 모음.

입력 스키마 위반은 marshmallow.ValidationError를 그대로 사용하고,
여기에는 그 외의 분류만 정의합니다.
"""


class BuddyTrackerError(Exception):
    """모든 도메인 예외의 기반 클래스."""
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error_code": self.error_code, "message": self.message}


class NotFoundError(BuddyTrackerError):
    """요청한 id의 반려동물/트래커/기록이 존재하지 않을 때."""
    status_code = 404
    error_code = "NOT_FOUND"


class UploadError(BuddyTrackerError):
    """업로드 요청 자체가 잘못된 경우의 공통 기반."""
    status_code = 400
    error_code = "UPLOAD_REJECTED"


class MissingFileError(UploadError):
    error_code = "NO_FILE"


class UnsupportedMediaError(UploadError):
    error_code = "INVALID_FILE_TYPE"


class SizeLimitError(UploadError):
    error_code = "FILE_TOO_LARGE"
