# buddy_tracker/api/uploads/routes.py

import logging
from flask import request, jsonify, Blueprint, current_app, send_from_directory

from buddy_tracker.core.exceptions import UploadError

# 파일 업로드 API ('/upload')
uploads_bp = Blueprint('uploads', __name__)

# 저장된 파일 제공 ('/uploads/<filename>')
uploaded_files_bp = Blueprint('uploaded_files', __name__)


@uploads_bp.route('', methods=['POST'])
def upload_file():
    """
    multipart 요청의 'file' 필드로 이미지 하나를 받아 공개 디렉터리에 저장합니다.
    저장된 파일의 URL은 이후 Image 타입 기록 값으로 사용됩니다.
    """
    storage_service = current_app.services['storage']

    try:
        result = storage_service.save_upload(request.files.get('file'))
        return jsonify(result), 201

    except UploadError as e:
        # 파일 누락, 허용되지 않는 타입, 용량 초과
        logging.warning(f"Upload rejected: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    except Exception as e:
        logging.error(f"File upload failed: {e}", exc_info=True)
        return jsonify({"error_code": "UPLOAD_FAILED", "message": "Failed to upload file"}), 500


@uploaded_files_bp.route('/<path:filename>', methods=['GET'])
def get_uploaded_file(filename: str):
    """업로드된 파일을 반환합니다. 없으면 404."""
    storage_service = current_app.services['storage']
    return send_from_directory(storage_service.upload_folder, filename)
