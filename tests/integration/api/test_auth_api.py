from __future__ import annotations

AUTH = "/api/v1/auth"


def test_register_login_and_use_token(client):
    response = client.post(
        f"{AUTH}/register",
        json={"email": "Owner@Example.com", "password": "s3cret-pass", "full_name": "Owner"},
    )
    assert response.status_code == 201
    assert response.json()["email"] == "owner@example.com"

    tokens = client.post(f"{AUTH}/login", json={"email": "owner@example.com", "password": "s3cret-pass"}).json()
    assert tokens["token_type"] == "bearer"

    response = client.get("/api/v1/leads", headers={"Authorization": f"Bearer {tokens['access_token']}"})
    assert response.status_code == 200
    assert response.json() == {"items": [], "total": 0}


def test_duplicate_registration_is_rejected(client):
    payload = {"email": "owner@example.com", "password": "s3cret-pass"}
    assert client.post(f"{AUTH}/register", json=payload).status_code == 201

    response = client.post(f"{AUTH}/register", json=payload)
    assert response.status_code == 422
    assert "email" in response.json()["detail"]["errors"]


def test_login_with_bad_password_is_unauthorized(client):
    client.post(f"{AUTH}/register", json={"email": "owner@example.com", "password": "s3cret-pass"})

    response = client.post(f"{AUTH}/login", json={"email": "owner@example.com", "password": "wrong-pass"})

    assert response.status_code == 401
    assert response.json()["detail"]["error_code"] == "unauthorized"


def test_refresh_requires_refresh_token(client):
    client.post(f"{AUTH}/register", json={"email": "owner@example.com", "password": "s3cret-pass"})
    tokens = client.post(f"{AUTH}/login", json={"email": "owner@example.com", "password": "s3cret-pass"}).json()

    assert client.post(f"{AUTH}/refresh", json={"refresh_token": tokens["access_token"]}).status_code == 401

    response = client.post(f"{AUTH}/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 200
    assert response.json()["access_token"]


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"
    assert response.json()["status"] == "ok"
