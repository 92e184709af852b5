# buddy_tracker/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # DATABASE_URL이 없으면 작업 디렉터리의 SQLite 파일을 사용합니다.
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///buddytracker.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 업로드 파일은 public/uploads 아래에 저장되고 /uploads/<filename> 경로로 제공됩니다.
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join(os.getcwd(), 'public', 'uploads'))
    UPLOAD_URL_PREFIX = '/uploads'
    MAX_UPLOAD_SIZE = int(os.getenv('MAX_UPLOAD_SIZE', 5 * 1024 * 1024))
    ALLOWED_UPLOAD_TYPES = ('image/jpeg', 'image/png', 'image/gif', 'image/webp')

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    # 테스트마다 비어 있는 인메모리 데이터베이스를 사용합니다.
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

class ProductionConfig(Config):
    """운영 환경을 위한 설정 클래스입니다."""
    DEBUG = False

# FLASK_ENV 값에 따라 create_app에서 적절한 설정 클래스를 선택합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
