# buddy_tracker/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정 및 확장
from buddy_tracker.core.config import config_by_name
from buddy_tracker.core.exceptions import BuddyTrackerError
from buddy_tracker.extensions import db

# - API 블루프린트
from buddy_tracker.api.pets.routes import pets_bp
from buddy_tracker.api.trackers.routes import trackers_bp
from buddy_tracker.api.entries.routes import entries_bp
from buddy_tracker.api.uploads.routes import uploads_bp, uploaded_files_bp

# - 서비스 모듈
from buddy_tracker.services.storage_service import StorageService
from buddy_tracker.api.pets.services import PetService
from buddy_tracker.api.trackers.services import TrackerService
from buddy_tracker.api.entries.services import EntryService

def create_app(config_name=None, config_overrides=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' / 'testing' / 'production' (기본값: FLASK_ENV)
    :param config_overrides: 설정 클래스 위에 덮어쓸 값 (테스트용 업로드 경로 등)
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"알 수 없는 설정 이름입니다: {config_name}")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if config_overrides:
        app.config.update(config_overrides)
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 확장 기능 초기화 (데이터베이스)
    # =====================================================================================
    db.init_app(app)
    # 마이그레이션 도구 없이 시작 시점에 테이블을 생성합니다.
    with app.app_context():
        db.create_all()

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    try:
        storage_instance = StorageService()
        storage_instance.init_app(app)
        app.services['storage'] = storage_instance
    except Exception as e:
        logging.error(f"Failed to initialize storage service: {e}")
        raise

    app.services['pets'] = PetService()
    app.services['trackers'] = TrackerService()
    app.services['entries'] = EntryService()

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(pets_bp, url_prefix='/pets')
    app.register_blueprint(trackers_bp, url_prefix='/trackers')
    app.register_blueprint(entries_bp, url_prefix='/entries')
    app.register_blueprint(uploads_bp, url_prefix='/upload')
    app.register_blueprint(uploaded_files_bp, url_prefix=app.config['UPLOAD_URL_PREFIX'])

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(BuddyTrackerError)
    def handle_domain_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # 라우팅 404, 405 등 Werkzeug가 만든 오류도 JSON으로 반환
        response = {"error_code": err.name.upper().replace(' ', '_'), "message": err.description}
        return jsonify(response), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "An unexpected error occurred on the server."}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
