# buddy_tracker/api/entries/test_entries_api.py
"""
기록 API 테스트

사용법: python -m pytest buddy_tracker/api/entries -v
"""

WEIGHT_LOG = [
    {"fieldName": "Medication", "fieldType": "Text", "fieldValue": "Heartgard"},
    {"fieldName": "Dosage", "fieldType": "Decimal", "fieldValue": "250"},
    {"fieldName": "Date Given", "fieldType": "Date", "fieldValue": "2024-03-01"},
    {"fieldName": "Photo", "fieldType": "Image", "fieldValue": "/uploads/1700000000000-abc123.png"},
]

def test_entry_round_trip_keeps_values_verbatim(client, make_pet, make_tracker):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])

    res = client.post('/entries', json={
        "trackerId": str(tracker["id"]), "petId": pet["petId"], "data": WEIGHT_LOG
    })
    assert res.status_code == 201
    created = res.get_json()
    assert created["trackerId"] == tracker["id"]
    assert created["images"] == []
    assert created["createdAt"].endswith("Z")

    body = client.get(f"/entries/{created['id']}").get_json()
    pairs = {(d["fieldName"], d["fieldValue"]) for d in body["data"]}
    assert pairs == {(d["fieldName"], d["fieldValue"]) for d in WEIGHT_LOG}
    dosage = next(d for d in body["data"] if d["fieldName"] == "Dosage")
    assert dosage["fieldValue"] == "250"
    assert body["tracker"]["id"] == tracker["id"]
    assert len(body["tracker"]["options"]) == 3

def test_entry_field_type_is_accepted_as_supplied(client, make_pet, make_tracker):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    res = client.post('/entries', json={
        "trackerId": tracker["id"], "petId": pet["petId"],
        "data": [{"fieldName": "Mood", "fieldType": "Emoji", "fieldValue": "happy"}],
    })
    assert res.status_code == 201
    assert res.get_json()["data"][0]["fieldType"] == "Emoji"

def test_entry_value_must_be_string(client, make_pet, make_tracker):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    res = client.post('/entries', json={
        "trackerId": tracker["id"], "petId": pet["petId"],
        "data": [{"fieldName": "Dosage", "fieldType": "Decimal", "fieldValue": 250}],
    })
    assert res.status_code == 400

def test_create_entry_requires_tracker_and_pet(client):
    res = client.post('/entries', json={"data": []})
    assert res.status_code == 400
    details = res.get_json()["details"]
    assert "trackerId" in details
    assert "petId" in details

def test_create_entry_with_images(client, make_pet, make_tracker):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    res = client.post('/entries', json={
        "trackerId": tracker["id"], "petId": pet["petId"], "data": [],
        "images": [{"url": "/uploads/a.png"}, {"url": "/uploads/b.png"}],
    })
    assert res.status_code == 201
    assert [img["url"] for img in res.get_json()["images"]] == ["/uploads/a.png", "/uploads/b.png"]

def test_list_entries_filtered_newest_first(client, make_pet, make_tracker, make_entry):
    pet = make_pet()
    first_tracker = make_tracker(pet["petId"], name="A")
    second_tracker = make_tracker(pet["petId"], name="B")
    older = make_entry(first_tracker)
    newer = make_entry(first_tracker)
    other = make_entry(second_tracker)

    filtered = client.get(f"/entries?trackerId={first_tracker['id']}").get_json()
    assert [e["id"] for e in filtered] == [newer["id"], older["id"]]
    assert all("data" in e and "images" in e for e in filtered)

    everything = client.get('/entries').get_json()
    assert {e["id"] for e in everything} == {older["id"], newer["id"], other["id"]}

def test_list_entries_rejects_non_numeric_tracker_id(client):
    assert client.get('/entries?trackerId=abc').status_code == 400

def test_list_entries_with_empty_tracker_id_returns_all(client, make_pet, make_tracker, make_entry):
    pet = make_pet()
    first = make_entry(make_tracker(pet["petId"], name="A"))
    second = make_entry(make_tracker(pet["petId"], name="B"))
    res = client.get('/entries?trackerId=')
    assert res.status_code == 200
    assert {e["id"] for e in res.get_json()} == {first["id"], second["id"]}

def test_get_unknown_entry_returns_404(client):
    assert client.get('/entries/424242').status_code == 404

def test_patch_data_replaces_all_rows(client, make_pet, make_tracker, make_entry):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    entry = make_entry(tracker, data=WEIGHT_LOG)
    old_ids = {d["id"] for d in entry["data"]}

    res = client.patch(f"/entries/{entry['id']}", json={
        "data": [{"fieldName": "Dosage", "fieldType": "Decimal", "fieldValue": "125.5"}]
    })
    assert res.status_code == 200
    body = res.get_json()
    assert [(d["fieldName"], d["fieldValue"]) for d in body["data"]] == [("Dosage", "125.5")]
    assert old_ids.isdisjoint({d["id"] for d in body["data"]})

def test_patch_without_data_leaves_values(client, make_pet, make_tracker, make_entry):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    entry = make_entry(tracker, data=WEIGHT_LOG)

    res = client.patch(f"/entries/{entry['id']}", json={"petId": pet["petId"]})
    assert res.status_code == 200
    assert [d["id"] for d in res.get_json()["data"]] == [d["id"] for d in entry["data"]]

def test_patch_unknown_entry_returns_404(client):
    assert client.patch('/entries/777', json={"data": []}).status_code == 404

def test_delete_entry(client, make_pet, make_tracker, make_entry):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    entry = make_entry(tracker)

    res = client.delete(f"/entries/{entry['id']}")
    assert res.status_code == 200
    assert res.get_json()["message"] == "Entry deleted successfully"
    assert client.get(f"/entries/{entry['id']}").status_code == 404
