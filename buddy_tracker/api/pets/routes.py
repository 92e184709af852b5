# buddy_tracker/api/pets/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from buddy_tracker.core.exceptions import NotFoundError
from .schemas import (
    PetCreateSchema,
    PetUpdateSchema,
    PetResponseSchema,
    PetDetailResponseSchema
)

pets_bp = Blueprint('pets_bp', __name__)

@pets_bp.route('', methods=['GET'])
def list_pets():
    """반려동물 목록 API (최근 수정 순)."""
    pet_service = current_app.services['pets']
    try:
        pets = pet_service.list_pets()
        return jsonify(PetResponseSchema(many=True).dump(pets)), 200
    except Exception as e:
        logging.error(f"List pets API error: {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "Failed to fetch pets"}), 500

@pets_bp.route('', methods=['POST'])
def create_pet():
    """반려동물 등록 API."""
    pet_service = current_app.services['pets']
    try:
        validated_data = PetCreateSchema().load(request.get_json(silent=True) or {})
        new_pet = pet_service.create_pet(validated_data)
        return jsonify(PetResponseSchema().dump(new_pet)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Pet registration API error: {e}", exc_info=True)
        return jsonify({"error_code": "PET_REGISTRATION_FAILED", "message": "Failed to create pet"}), 500

@pets_bp.route('/<string:pet_id>', methods=['GET'])
def get_pet(pet_id: str):
    """특정 반려동물의 프로필을 트래커 목록과 함께 조회합니다."""
    pet_service = current_app.services['pets']
    try:
        pet = pet_service.get_pet(pet_id)
        return jsonify(PetDetailResponseSchema().dump(pet)), 200
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Get pet API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "Failed to fetch pet"}), 500

@pets_bp.route('/<string:pet_id>', methods=['PATCH'])
def update_pet(pet_id: str):
    """특정 반려동물의 프로필 정보를 수정합니다 (부분 업데이트)."""
    pet_service = current_app.services['pets']
    try:
        update_data = PetUpdateSchema().load(request.get_json(silent=True) or {})
        updated_pet = pet_service.update_pet(pet_id, update_data)
        return jsonify(PetResponseSchema().dump(updated_pet)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Update pet API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to update pet"}), 500

@pets_bp.route('/<string:pet_id>', methods=['DELETE'])
def delete_pet(pet_id: str):
    """반려동물과 그에 딸린 모든 트래커/기록을 삭제합니다."""
    pet_service = current_app.services['pets']
    try:
        pet_service.delete_pet(pet_id)
        return jsonify({"message": "Pet deleted successfully"}), 200
    except NotFoundError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Delete pet API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "DELETE_FAILED", "message": "Failed to delete pet"}), 500
