# buddy_tracker/api/trackers/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from buddy_tracker.core.exceptions import NotFoundError
from .schemas import (
    TrackerCreateSchema,
    TrackerUpdateSchema,
    TrackerResponseSchema,
    TrackerDetailResponseSchema
)

trackers_bp = Blueprint('trackers_bp', __name__)

@trackers_bp.route('', methods=['GET'])
def list_trackers():
    """
    트래커 목록 API.

    쿼리 파라미터:
    - petId: 특정 반려동물의 트래커만 조회 (정확히 일치)
    """
    service = current_app.services['trackers']
    try:
        trackers = service.list_trackers(request.args.get('petId'))
        return jsonify(TrackerResponseSchema(many=True).dump(trackers)), 200
    except Exception as e:
        logging.error(f"List trackers API error: {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "Failed to fetch trackers"}), 500

@trackers_bp.route('', methods=['POST'])
def create_tracker():
    """트래커 생성 API. 옵션 행도 함께 생성됩니다."""
    service = current_app.services['trackers']
    try:
        validated_data = TrackerCreateSchema().load(request.get_json(silent=True) or {})
        tracker = service.create_tracker(validated_data)
        return jsonify(TrackerResponseSchema().dump(tracker)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Tracker creation API error: {e}", exc_info=True)
        return jsonify({"error_code": "TRACKER_CREATION_FAILED", "message": "Failed to create tracker"}), 500

@trackers_bp.route('/<int:tracker_id>', methods=['GET'])
def get_tracker(tracker_id: int):
    """트래커를 옵션 및 상위 반려동물 정보와 함께 조회합니다."""
    service = current_app.services['trackers']
    try:
        tracker = service.get_tracker(tracker_id)
        return jsonify(TrackerDetailResponseSchema().dump(tracker)), 200
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Get tracker API error (tracker_id: {tracker_id}): {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "Failed to fetch tracker"}), 500

@trackers_bp.route('/<int:tracker_id>', methods=['PATCH'])
def update_tracker(tracker_id: int):
    """트래커 이름 및/또는 옵션 목록을 수정합니다. 옵션은 전체 교체됩니다."""
    service = current_app.services['trackers']
    try:
        update_data = TrackerUpdateSchema().load(request.get_json(silent=True) or {})
        tracker = service.update_tracker(tracker_id, update_data)
        return jsonify(TrackerResponseSchema().dump(tracker)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Update tracker API error (tracker_id: {tracker_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to update tracker"}), 500

@trackers_bp.route('/<int:tracker_id>', methods=['DELETE'])
def delete_tracker(tracker_id: int):
    service = current_app.services['trackers']
    try:
        service.delete_tracker(tracker_id)
        return jsonify({"message": "Tracker deleted successfully"}), 200
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Delete tracker API error (tracker_id: {tracker_id}): {e}", exc_info=True)
        return jsonify({"error_code": "DELETE_FAILED", "message": "Failed to delete tracker"}), 500
