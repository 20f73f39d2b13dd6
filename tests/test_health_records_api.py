import pytest

from app.crud import crud_alert


def _create(client, headers, child_id, weight, height, **extra):
    payload = {"child_id": child_id, "weight": weight, "height": height, "record_date": "2025-06-01"}
    payload.update(extra)
    return client.post("/api/v1/health-records", json=payload, headers=headers)


@pytest.mark.parametrize(
    "weight, height, status, alert_type",
    [
        (2.5, 0.5, "Underweight", "underweight"),
        (6, 0.55, "Overweight", "overweight"),
        (12, 0.7, "Obese", "overweight"),
        (6, 0.6, "Normal", None),
    ],
)
def test_classification_and_alert_side_effect(client, db, child, doctor_headers, weight, height, status, alert_type):
    response = _create(client, doctor_headers, child.id, weight, height)

    assert response.status_code == 201
    body = response.json()
    assert body["nutrition_status"] == status
    assert body["alert_type"] == alert_type

    alerts = crud_alert.get_filtered(db, child_id=child.id)
    if alert_type is None:
        assert alerts == []
        assert body["alert_id"] is None
    else:
        [alert] = alerts
        assert alert.id == body["alert_id"]
        assert alert.status == "pending"
        assert alert.alert_type == alert_type


def test_underweight_alert_message(client, db, child, doctor_headers):
    _create(client, doctor_headers, child.id, 2.5, 0.5)
    [alert] = crud_alert.get_filtered(db, child_id=child.id)
    assert alert.message == "Child is underweight. Nutritional assessment recommended."


def test_bmi_in_response(client, child, doctor_headers):
    body = _create(client, doctor_headers, child.id, 6, 0.6).json()
    assert body["bmi"] == 16.67


def test_explicit_status_is_stored(client, child, doctor_headers):
    body = _create(client, doctor_headers, child.id, 6, 0.6, nutrition_status="Underweight").json()
    assert body["nutrition_status"] == "Underweight"


@pytest.mark.parametrize(
    "overrides",
    [
        {"height": 0},
        {"weight": -1},
        {"record_date": "2025-13-01"},
        {"nutrition_status": "Chubby"},
    ],
)
def test_invalid_measurements_are_rejected(client, db, child, doctor_headers, overrides):
    payload = {"child_id": child.id, "weight": 6, "height": 0.6}
    payload.update(overrides)
    response = client.post("/api/v1/health-records", json=payload, headers=doctor_headers)

    assert response.status_code == 422
    assert crud_alert.get_filtered(db) == []


def test_mother_cannot_create_records(client, child, mother_headers):
    assert _create(client, mother_headers, child.id, 6, 0.6).status_code == 403


def test_unknown_child(client, doctor_headers):
    assert _create(client, doctor_headers, 999, 6, 0.6).status_code == 404


def test_trend_and_latest(client, child, doctor_headers, mother_headers):
    _create(client, doctor_headers, child.id, 7.0, 0.65, record_date="2025-03-01")
    _create(client, doctor_headers, child.id, 6.0, 0.6, record_date="2025-01-01")
    _create(client, doctor_headers, child.id, 7.5, 0.68, record_date="2025-03-01")

    trend = client.get(f"/api/v1/health-records/child/{child.id}/growth-trend", headers=mother_headers).json()
    assert [p["record_date"] for p in trend["points"]] == ["2025-01-01", "2025-03-01", "2025-03-01"]

    latest = client.get(f"/api/v1/health-records/child/{child.id}/latest", headers=mother_headers).json()
    assert latest["weight"] == 7.5


def test_latest_without_records_is_404(client, child, mother_headers):
    assert client.get(f"/api/v1/health-records/child/{child.id}/latest", headers=mother_headers).status_code == 404


def test_update_relabels_without_new_alert(client, db, child, doctor_headers):
    record = _create(client, doctor_headers, child.id, 6, 0.6).json()

    response = client.put(f"/api/v1/health-records/{record['id']}", json={"weight": 2.5}, headers=doctor_headers)

    assert response.status_code == 200
    assert response.json()["nutrition_status"] == "Underweight"
    assert crud_alert.get_filtered(db, child_id=child.id) == []


def test_delete_record(client, child, doctor_headers):
    record = _create(client, doctor_headers, child.id, 6, 0.6).json()
    assert client.delete(f"/api/v1/health-records/{record['id']}", headers=doctor_headers).status_code == 204
    assert client.get(f"/api/v1/health-records/{record['id']}", headers=doctor_headers).status_code == 404


@pytest.mark.parametrize("field", ["weight", "height", "nutrition_status"])
def test_update_rejects_null_for_required_fields(client, child, doctor_headers, field):
    record = _create(client, doctor_headers, child.id, 6, 0.6).json()

    response = client.put(f"/api/v1/health-records/{record['id']}", json={field: None}, headers=doctor_headers)

    assert response.status_code == 422
    stored = client.get(f"/api/v1/health-records/{record['id']}", headers=doctor_headers).json()
    assert stored[field] == record[field]


@pytest.mark.parametrize("new_date", ["2025-05-01", "2099-01-01"])
def test_record_date_cannot_be_changed(client, child, doctor_headers, new_date):
    record = _create(client, doctor_headers, child.id, 6, 0.6).json()

    response = client.put(
        f"/api/v1/health-records/{record['id']}",
        json={"record_date": new_date, "doctor_notes": "moved"},
        headers=doctor_headers,
    )

    assert response.status_code == 422
    stored = client.get(f"/api/v1/health-records/{record['id']}", headers=doctor_headers).json()
    assert stored["record_date"] == "2025-06-01"
    assert stored["doctor_notes"] is None
