from datetime import date, timedelta

from app.crud import crud_alert


def test_vaccination_report(client, make_child, mother, doctor_headers):
    first = make_child(mother, name="Baraka")
    make_child(mother, name="Imani", gender="female")
    client.post(
        "/api/v1/immunizations",
        json={"child_id": first.id, "vaccine_name": "BCG at birth", "date_given": "2023-01-15"},
        headers=doctor_headers,
    )

    report = client.get("/api/v1/reports/vaccination", headers=doctor_headers).json()

    bcg = next(c for c in report["coverage"] if c["vaccine"] == "BCG")
    assert bcg["given"] == 1
    assert bcg["percentage"] == 50
    assert [c["name"] for c in bcg["missing"]] == ["Imani"]
    assert report["average_vaccines_per_child"] == 0.5


def test_reports_are_for_doctors(client, mother_headers):
    assert client.get("/api/v1/reports/vaccination", headers=mother_headers).status_code == 403
    assert client.get("/api/v1/reports/health", headers=mother_headers).status_code == 403


def test_health_report(client, make_child, mother, doctor_headers):
    first = make_child(mother, name="Baraka")
    make_child(mother, name="Imani", gender="female")
    client.post(
        "/api/v1/health-records",
        json={"child_id": first.id, "weight": 9.0, "height": 0.75, "record_date": "2025-01-10"},
        headers=doctor_headers,
    )

    report = client.get("/api/v1/reports/health", headers=doctor_headers).json()

    assert report["children_with_records"] == 1
    assert [c["name"] for c in report["without_records"]] == ["Imani"]


def test_doctor_dashboard(client, db, child, doctor_headers):
    today = date.today()
    client.post(
        "/api/v1/health-records",
        json={"child_id": child.id, "weight": 2.5, "height": 0.5, "record_date": "2025-01-10"},
        headers=doctor_headers,
    )
    client.post(
        "/api/v1/immunizations",
        json={
            "child_id": child.id,
            "vaccine_name": "DPT",
            "date_given": (today - timedelta(days=40)).isoformat(),
            "next_due_date": (today - timedelta(days=3)).isoformat(),
        },
        headers=doctor_headers,
    )

    response = client.get("/api/v1/dashboard/doctor", headers=doctor_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["child_statistics"]["total_children"] == 1
    assert body["health_statistics"]["total_records"] == 1
    assert body["alert_statistics"] == {"pending": 1, "resolved": 0}
    assert body["immunization_statistics"]["overdue_count"] == 1
    assert body["user_statistics"] == {"mother": 1, "doctor": 1}
    assert [a["alert_type"] for a in body["pending_alerts"]] == ["underweight"]
    assert body["overdue_vaccinations"][0]["days_overdue"] == 3


def test_mother_dashboard(client, db, make_child, mother, other_mother, mother_headers):
    mine = make_child(mother)
    theirs = make_child(other_mother, name="Zawadi", gender="female")
    crud_alert.create_alert(db, child_id=mine.id, alert_type="underweight", message="x")
    crud_alert.create_alert(db, child_id=theirs.id, alert_type="underweight", message="y")

    response = client.get("/api/v1/dashboard/mother", headers=mother_headers)

    assert response.status_code == 200
    body = response.json()
    assert [c["id"] for c in body["children"]] == [mine.id]
    assert len(body["pending_alerts"]) == 1
    assert body["child_statistics"]["total_children"] == 1


def test_dashboards_are_role_gated(client, mother_headers, doctor_headers):
    assert client.get("/api/v1/dashboard/doctor", headers=mother_headers).status_code == 403
    assert client.get("/api/v1/dashboard/mother", headers=doctor_headers).status_code == 403
