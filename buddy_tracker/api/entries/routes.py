# buddy_tracker/api/entries/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from buddy_tracker.core.exceptions import NotFoundError
from .schemas import (
    EntryCreateSchema,
    EntryUpdateSchema,
    EntriesQuerySchema,
    EntryResponseSchema,
    EntryDetailResponseSchema
)

entries_bp = Blueprint('entries_bp', __name__)

@entries_bp.route('', methods=['GET'])
def list_entries():
    """
    기록 목록 API (최신 순).

    쿼리 파라미터:
    - trackerId: 특정 트래커의 기록만 조회
    """
    service = current_app.services['entries']
    try:
        params = EntriesQuerySchema().load(request.args)
        entries = service.list_entries(params.get('tracker_id'))
        return jsonify(EntryResponseSchema(many=True).dump(entries)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"List entries API error: {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "Failed to fetch entries"}), 500

@entries_bp.route('', methods=['POST'])
def create_entry():
    """기록 생성 API. 기록 값(및 선택적 이미지)도 함께 생성됩니다."""
    service = current_app.services['entries']
    try:
        validated_data = EntryCreateSchema().load(request.get_json(silent=True) or {})
        entry = service.create_entry(validated_data)
        return jsonify(EntryResponseSchema().dump(entry)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Entry creation API error: {e}", exc_info=True)
        return jsonify({"error_code": "ENTRY_CREATION_FAILED", "message": "Failed to create entry"}), 500

@entries_bp.route('/<int:entry_id>', methods=['GET'])
def get_entry(entry_id: int):
    """기록을 값, 이미지, 트래커 옵션과 함께 조회합니다."""
    service = current_app.services['entries']
    try:
        entry = service.get_entry(entry_id)
        return jsonify(EntryDetailResponseSchema().dump(entry)), 200
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Get entry API error (entry_id: {entry_id}): {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "Failed to fetch entry"}), 500

@entries_bp.route('/<int:entry_id>', methods=['PATCH'])
def update_entry(entry_id: int):
    """기록 값을 수정합니다. data가 주어지면 기존 값 전체를 교체합니다."""
    service = current_app.services['entries']
    try:
        update_data = EntryUpdateSchema().load(request.get_json(silent=True) or {})
        entry = service.update_entry(entry_id, update_data)
        return jsonify(EntryResponseSchema().dump(entry)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Update entry API error (entry_id: {entry_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to update entry"}), 500

@entries_bp.route('/<int:entry_id>', methods=['DELETE'])
def delete_entry(entry_id: int):
    service = current_app.services['entries']
    try:
        service.delete_entry(entry_id)
        return jsonify({"message": "Entry deleted successfully"}), 200
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Delete entry API error (entry_id: {entry_id}): {e}", exc_info=True)
        return jsonify({"error_code": "DELETE_FAILED", "message": "Failed to delete entry"}), 500
