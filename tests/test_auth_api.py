import pytest

REGISTER_URL = "/api/v1/auth/register"


def _payload(**overrides):
    payload = {
        "name": "Halima Said",
        "email": "halima@example.com",
        "phone": "+254 (700) 123-456",
        "password": "password123",
        "confirm_password": "password123",
        "role": "mother",
    }
    payload.update(overrides)
    return payload


def test_register_returns_token(client):
    response = client.post(REGISTER_URL, json=_payload(email="Halima@Example.com"))

    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "halima@example.com"
    assert body["user"]["role"] == "mother"

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["name"] == "Halima Said"


@pytest.mark.parametrize(
    "overrides",
    [
        {"password": "short", "confirm_password": "short"},
        {"confirm_password": "different123"},
        {"role": "admin"},
        {"email": "not-an-email"},
        {"phone": "call me"},
        {"name": "   "},
    ],
)
def test_register_validation(client, overrides):
    assert client.post(REGISTER_URL, json=_payload(**overrides)).status_code == 422


def test_register_duplicate_email(client, mother):
    response = client.post(REGISTER_URL, json=_payload(email="amina@example.com"))
    assert response.status_code == 400


def test_login(client, mother):
    response = client.post(
        "/api/v1/auth/login",
        data={"username": "amina@example.com", "password": "password123"},
    )
    assert response.status_code == 200
    assert response.json()["user"]["id"] == mother.id


def test_login_wrong_password(client, mother):
    response = client.post(
        "/api/v1/auth/login",
        data={"username": "amina@example.com", "password": "wrong-password"},
    )
    assert response.status_code == 401


def test_protected_endpoint_requires_token(client):
    assert client.get("/api/v1/children").status_code == 401
    bad = {"Authorization": "Bearer not-a-token"}
    assert client.get("/api/v1/children", headers=bad).status_code == 401


def test_change_password(client, mother_headers):
    response = client.put(
        "/api/v1/users/me/password",
        json={
            "current_password": "password123",
            "new_password": "newpassword456",
            "confirm_password": "newpassword456",
        },
        headers=mother_headers,
    )
    assert response.status_code == 200

    login = client.post(
        "/api/v1/auth/login",
        data={"username": "amina@example.com", "password": "newpassword456"},
    )
    assert login.status_code == 200


def test_change_password_wrong_current(client, mother_headers):
    response = client.put(
        "/api/v1/users/me/password",
        json={
            "current_password": "not-my-password",
            "new_password": "newpassword456",
            "confirm_password": "newpassword456",
        },
        headers=mother_headers,
    )
    assert response.status_code == 400


def test_mother_directory_is_for_doctors(client, mother_headers, doctor_headers, make_child, mother):
    make_child(mother)

    assert client.get("/api/v1/users/mothers", headers=mother_headers).status_code == 403

    response = client.get("/api/v1/users/mothers", headers=doctor_headers)
    assert response.status_code == 200
    [row] = response.json()
    assert row["email"] == "amina@example.com"
    assert row["children_count"] == 1


def test_mother_profile(client, doctor_headers, doctor, mother):
    assert client.get(f"/api/v1/users/mothers/{mother.id}", headers=doctor_headers).status_code == 200
    assert client.get(f"/api/v1/users/mothers/{doctor.id}", headers=doctor_headers).status_code == 404
