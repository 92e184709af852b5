# buddy_tracker/conftest.py
"""
공용 pytest 픽스처.

각 테스트는 인메모리 SQLite와 임시 업로드 디렉터리를 가진 새 앱을 사용합니다.
"""

import pytest

from buddy_tracker import create_app


@pytest.fixture
def app(tmp_path):
    return create_app('testing', {'UPLOAD_FOLDER': str(tmp_path / 'uploads')})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_pet(client):
    """반려동물을 생성하고 응답 JSON을 반환하는 헬퍼."""
    def _make_pet(**overrides):
        payload = {"name": "TestDog", "gender": "Male", "age": 5, "species": "Dog", "breed": "Labrador"}
        payload.update(overrides)
        res = client.post('/pets', json=payload)
        assert res.status_code == 201, res.get_json()
        return res.get_json()
    return _make_pet


@pytest.fixture
def make_tracker(client):
    """트래커를 생성하고 응답 JSON을 반환하는 헬퍼."""
    def _make_tracker(pet_id, name="Medication Log", options=None):
        if options is None:
            options = [
                {"fieldName": "Medication", "fieldType": "Text"},
                {"fieldName": "Dosage", "fieldType": "Decimal"},
                {"fieldName": "Date Given", "fieldType": "Date"},
            ]
        res = client.post('/trackers', json={"name": name, "petId": pet_id, "options": options})
        assert res.status_code == 201, res.get_json()
        return res.get_json()
    return _make_tracker


@pytest.fixture
def make_entry(client):
    """기록을 생성하고 응답 JSON을 반환하는 헬퍼."""
    def _make_entry(tracker, data=None):
        if data is None:
            data = [{"fieldName": "Medication", "fieldType": "Text", "fieldValue": "Heartgard"}]
        res = client.post('/entries', json={"trackerId": tracker["id"], "petId": tracker["petId"], "data": data})
        assert res.status_code == 201, res.get_json()
        return res.get_json()
    return _make_entry
