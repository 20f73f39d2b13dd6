from datetime import date, timedelta

import pytest


def _payload(mother_id, **overrides):
    payload = {
        "mother_id": mother_id,
        "record_type": "prenatal",
        "record_date": "2025-08-01",
        "weight": 65.5,
        "blood_pressure": "120/80",
        "pregnancy_week": 28,
    }
    payload.update(overrides)
    return payload


def test_create_and_read_own_records(client, mother, doctor_headers, mother_headers):
    created = client.post("/api/v1/mother-health-records", json=_payload(mother.id), headers=doctor_headers)
    assert created.status_code == 201

    own = client.get(f"/api/v1/mother-health-records/mother/{mother.id}", headers=mother_headers).json()
    assert own["total"] == 1
    assert own["records"][0]["blood_pressure"] == "120/80"


def test_mother_cannot_read_other_mother(client, other_mother, mother_headers):
    response = client.get(f"/api/v1/mother-health-records/mother/{other_mother.id}", headers=mother_headers)
    assert response.status_code == 403


def test_record_for_non_mother_is_404(client, doctor, doctor_headers):
    response = client.post("/api/v1/mother-health-records", json=_payload(doctor.id), headers=doctor_headers)
    assert response.status_code == 404


@pytest.mark.parametrize(
    "overrides",
    [
        {"weight": None, "blood_pressure": None},
        {"blood_pressure": "high"},
        {"hemoglobin": 25},
        {"blood_sugar": 600},
        {"pregnancy_week": 43},
        {"record_type": "antenatal"},
        {"delivery_type": "home"},
    ],
)
def test_validation(client, mother, doctor_headers, overrides):
    response = client.post(
        "/api/v1/mother-health-records", json=_payload(mother.id, **overrides), headers=doctor_headers
    )
    assert response.status_code == 422


def test_filters_trend_and_upcoming(client, mother, doctor_headers):
    soon = (date.today() + timedelta(days=3)).isoformat()
    later = (date.today() + timedelta(days=30)).isoformat()
    client.post(
        "/api/v1/mother-health-records",
        json=_payload(mother.id, record_date="2025-06-01", next_checkup_date=later),
        headers=doctor_headers,
    )
    client.post(
        "/api/v1/mother-health-records",
        json=_payload(
            mother.id,
            record_type="postnatal",
            record_date="2025-07-01",
            pregnancy_week=None,
            delivery_date="2025-06-20",
            delivery_type="cesarean",
            next_checkup_date=soon,
        ),
        headers=doctor_headers,
    )

    postnatal = client.get("/api/v1/mother-health-records?record_type=postnatal", headers=doctor_headers).json()
    assert [r["delivery_type"] for r in postnatal] == ["cesarean"]
    assert postnatal[0]["mother_name"] == "Amina Njeri"

    trend = client.get(f"/api/v1/mother-health-records/mother/{mother.id}/trend", headers=doctor_headers).json()
    assert [p["record_date"] for p in trend] == ["2025-06-01", "2025-07-01"]

    upcoming = client.get("/api/v1/mother-health-records/upcoming-checkups", headers=doctor_headers).json()
    assert [r["record_type"] for r in upcoming] == ["postnatal"]


def test_update_and_delete(client, mother, doctor_headers, mother_headers):
    record = client.post(
        "/api/v1/mother-health-records", json=_payload(mother.id), headers=doctor_headers
    ).json()

    updated = client.put(
        f"/api/v1/mother-health-records/{record['id']}", json={"hemoglobin": 11.2}, headers=doctor_headers
    )
    assert updated.json()["hemoglobin"] == 11.2
    assert client.delete(f"/api/v1/mother-health-records/{record['id']}", headers=mother_headers).status_code == 403
    assert client.delete(f"/api/v1/mother-health-records/{record['id']}", headers=doctor_headers).status_code == 204


def test_update_keeps_record_date_and_type(client, mother, doctor_headers):
    record = client.post(
        "/api/v1/mother-health-records", json=_payload(mother.id), headers=doctor_headers
    ).json()
    url = f"/api/v1/mother-health-records/{record['id']}"

    assert client.put(url, json={"record_date": "2025-09-01"}, headers=doctor_headers).status_code == 422
    assert client.put(url, json={"record_type": None}, headers=doctor_headers).status_code == 422

    stored = client.get(url, headers=doctor_headers).json()
    assert stored["record_date"] == "2025-08-01"
    assert stored["record_type"] == "prenatal"
