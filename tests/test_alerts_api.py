from datetime import timedelta

from app.crud import crud_alert
from app.crud.alert import utc_now
from app.models.alert import Alert


def test_manual_alert_and_one_way_resolve(client, child, doctor_headers):
    created = client.post(
        "/api/v1/alerts",
        json={"child_id": child.id, "alert_type": "missed_checkup", "message": "Missed the 9-month check."},
        headers=doctor_headers,
    )
    assert created.status_code == 201
    alert_id = created.json()["id"]
    assert created.json()["status"] == "pending"

    first = client.post(f"/api/v1/alerts/{alert_id}/resolve", headers=doctor_headers).json()
    assert first["changed"] is True
    assert first["alert"]["status"] == "resolved"
    assert first["alert"]["resolved_at"] is not None

    second = client.post(f"/api/v1/alerts/{alert_id}/resolve", headers=doctor_headers).json()
    assert second["changed"] is False
    assert second["alert"]["status"] == "resolved"
    assert second["alert"]["resolved_at"] == first["alert"]["resolved_at"]


def test_resolve_unknown_alert(client, doctor_headers):
    assert client.post("/api/v1/alerts/999/resolve", headers=doctor_headers).status_code == 404


def test_mother_cannot_resolve(client, db, child, mother_headers):
    alert = crud_alert.create_alert(db, child_id=child.id, alert_type="underweight", message="x")
    assert client.post(f"/api/v1/alerts/{alert.id}/resolve", headers=mother_headers).status_code == 403


def test_invalid_alert_type(client, child, doctor_headers):
    response = client.post(
        "/api/v1/alerts",
        json={"child_id": child.id, "alert_type": "Not Valid!", "message": "x"},
        headers=doctor_headers,
    )
    assert response.status_code == 422


def test_status_filter_and_scoping(client, db, make_child, mother, other_mother, mother_headers, doctor_headers):
    mine = make_child(mother)
    theirs = make_child(other_mother, name="Zawadi", gender="female")
    pending = crud_alert.create_alert(db, child_id=mine.id, alert_type="underweight", message="x")
    done = crud_alert.create_alert(db, child_id=mine.id, alert_type="overweight", message="y")
    crud_alert.resolve(db, alert_id=done.id)
    crud_alert.create_alert(db, child_id=theirs.id, alert_type="underweight", message="z")

    own = client.get("/api/v1/alerts?status=pending", headers=mother_headers).json()
    assert [a["id"] for a in own] == [pending.id]
    assert own[0]["child_name"] == "Baraka"

    assert len(client.get("/api/v1/alerts", headers=doctor_headers).json()) == 3
    assert client.get("/api/v1/alerts?status=closed", headers=doctor_headers).status_code == 422
    assert client.get(f"/api/v1/alerts?child_id={theirs.id}", headers=mother_headers).status_code == 403


def test_purge_keeps_pending(client, db, child, doctor_headers):
    old = utc_now() - timedelta(days=60)
    db.add_all([
        Alert(child_id=child.id, alert_type="old_resolved", message="m", status="resolved", created_at=old),
        Alert(child_id=child.id, alert_type="old_pending", message="m", status="pending", created_at=old),
    ])
    db.commit()

    response = client.post("/api/v1/alerts/purge-resolved?days=30", headers=doctor_headers)

    assert response.status_code == 200
    assert response.json() == {"deleted": 1, "retention_days": 30}
    assert [a.alert_type for a in crud_alert.get_filtered(db)] == ["old_pending"]


def test_delete_alert(client, db, child, doctor_headers):
    alert = crud_alert.create_alert(db, child_id=child.id, alert_type="underweight", message="x")
    assert client.delete(f"/api/v1/alerts/{alert.id}", headers=doctor_headers).status_code == 204
    assert client.delete(f"/api/v1/alerts/{alert.id}", headers=doctor_headers).status_code == 404
