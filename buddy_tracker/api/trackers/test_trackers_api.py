# buddy_tracker/api/trackers/test_trackers_api.py
"""
트래커 API 테스트

사용법: python -m pytest buddy_tracker/api/trackers -v
"""

def test_create_tracker_with_options(client, make_pet):
    pet = make_pet()
    res = client.post('/trackers', json={
        "name": "Medication Log",
        "petId": pet["petId"],
        "options": [
            {"fieldName": "Medication", "fieldType": "Text"},
            {"fieldName": "Dosage", "fieldType": "Decimal"},
            {"fieldName": "Date Given", "fieldType": "Date"},
        ],
    })
    assert res.status_code == 201
    tracker = res.get_json()
    assert isinstance(tracker["id"], int)
    assert tracker["petId"] == pet["petId"]
    assert len(tracker["options"]) == 3
    assert all(opt["trackerId"] == tracker["id"] for opt in tracker["options"])

    single = client.get(f"/trackers/{tracker['id']}").get_json()
    assert {(o["fieldName"], o["fieldType"]) for o in single["options"]} == {
        ("Medication", "Text"), ("Dosage", "Decimal"), ("Date Given", "Date")
    }
    assert single["pet"]["name"] == pet["name"]
    assert "trackers" not in single["pet"]

def test_create_tracker_requires_at_least_one_option(client, make_pet):
    pet = make_pet()
    res = client.post('/trackers', json={"name": "Empty", "petId": pet["petId"], "options": []})
    assert res.status_code == 400
    assert "options" in res.get_json()["details"]

def test_create_tracker_rejects_unknown_field_type(client, make_pet):
    pet = make_pet()
    res = client.post('/trackers', json={
        "name": "Bad", "petId": pet["petId"],
        "options": [{"fieldName": "Color", "fieldType": "Colour"}],
    })
    assert res.status_code == 400

def test_create_tracker_for_unknown_pet_is_rejected_by_store(client):
    res = client.post('/trackers', json={
        "name": "Orphan", "petId": "no-such-pet",
        "options": [{"fieldName": "Weight", "fieldType": "Decimal"}],
    })
    assert res.status_code == 500

def test_list_trackers_filtered_and_newest_first(client, make_pet, make_tracker):
    dog = make_pet(name="Dog")
    cat = make_pet(name="Cat")
    older = make_tracker(dog["petId"], name="Older")
    newer = make_tracker(dog["petId"], name="Newer")
    make_tracker(cat["petId"], name="Cat Tracker")

    all_trackers = client.get('/trackers').get_json()
    assert len(all_trackers) == 3
    assert [t["id"] for t in all_trackers] == sorted((t["id"] for t in all_trackers), reverse=True)

    filtered = client.get(f"/trackers?petId={dog['petId']}").get_json()
    assert [t["id"] for t in filtered] == [newer["id"], older["id"]]
    assert all(t["petId"] == dog["petId"] for t in filtered)
    assert all(len(t["options"]) == 3 for t in filtered)

def test_get_unknown_tracker_returns_404(client):
    assert client.get('/trackers/9999').status_code == 404

def test_patch_options_replaces_rows(client, make_pet, make_tracker):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    old_ids = {opt["id"] for opt in tracker["options"]}

    res = client.patch(f"/trackers/{tracker['id']}", json={
        "name": "Updated Medication Log",
        "petId": pet["petId"],
        "options": [
            {"fieldName": "Medication", "fieldType": "Text"},
            {"fieldName": "Dosage", "fieldType": "Decimal"},
            {"fieldName": "Date Given", "fieldType": "Date"},
            {"fieldName": "Notes", "fieldType": "Text"},
        ],
    })
    assert res.status_code == 200
    updated = res.get_json()
    assert updated["name"] == "Updated Medication Log"
    assert len(updated["options"]) == 4
    new_ids = {opt["id"] for opt in updated["options"]}
    assert old_ids.isdisjoint(new_ids)

    refetched = client.get(f"/trackers/{tracker['id']}").get_json()
    assert {opt["id"] for opt in refetched["options"]} == new_ids

def test_patch_name_only_keeps_options(client, make_pet, make_tracker):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    res = client.patch(f"/trackers/{tracker['id']}", json={"name": "Renamed"})
    assert res.status_code == 200
    body = res.get_json()
    assert body["name"] == "Renamed"
    assert [o["id"] for o in body["options"]] == [o["id"] for o in tracker["options"]]

def test_patch_with_empty_options_fails(client, make_pet, make_tracker):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    res = client.patch(f"/trackers/{tracker['id']}", json={"options": []})
    assert res.status_code == 400

def test_patch_options_keeps_existing_entry_values(client, make_pet, make_tracker, make_entry):
    pet = make_pet()
    tracker = make_tracker(pet["petId"])
    entry = make_entry(tracker)

    client.patch(f"/trackers/{tracker['id']}", json={
        "options": [{"fieldName": "Weight", "fieldType": "Decimal"}]
    })

    body = client.get(f"/entries/{entry['id']}").get_json()
    assert [(d["fieldName"], d["fieldType"]) for d in body["data"]] == [("Medication", "Text")]
    assert [o["fieldName"] for o in body["tracker"]["options"]] == ["Weight"]

def test_delete_tracker_leaves_sibling_trackers(client, make_pet, make_tracker, make_entry):
    pet = make_pet()
    keep = make_tracker(pet["petId"], name="Keep")
    drop = make_tracker(pet["petId"], name="Drop")
    kept_entry = make_entry(keep)
    make_entry(drop)

    res = client.delete(f"/trackers/{drop['id']}")
    assert res.status_code == 200
    assert res.get_json()["message"] == "Tracker deleted successfully"

    remaining = client.get(f"/trackers?petId={pet['petId']}").get_json()
    assert [t["id"] for t in remaining] == [keep["id"]]
    assert [e["id"] for e in client.get(f"/entries?trackerId={keep['id']}").get_json()] == [kept_entry["id"]]
    assert client.get(f"/entries?trackerId={drop['id']}").get_json() == []

def test_delete_unknown_tracker_returns_404(client):
    assert client.delete('/trackers/12345').status_code == 404
