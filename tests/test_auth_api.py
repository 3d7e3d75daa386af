from models import Profile, User


def _signup_payload(**overrides):
    payload = {
        "email": "Owner@Example.com",
        "password": "abc123",
        "confirmPassword": "abc123",
        "firstName": "Asha",
        "lastName": "Rao",
        "phone": "+919800000000",
        "role": "building-owner",
    }
    payload.update(overrides)
    return payload


def test_signup_creates_user_and_profile(client, db_session):
    response = client.post("/api/auth/signup", json=_signup_payload())

    assert response.status_code == 201
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["profile"]["role"] == "building_owner"
    assert data["profile"]["verification_status"] == "pending"
    assert db_session.query(User).filter(User.email == "owner@example.com").count() == 1


def test_signup_password_mismatch_writes_nothing(client, db_session):
    response = client.post("/api/auth/signup", json=_signup_payload(confirmPassword="xyz789"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Passwords do not match"
    assert db_session.query(User).count() == 0
    assert db_session.query(Profile).count() == 0


def test_signup_maps_brand_alias(client):
    response = client.post("/api/auth/signup", json=_signup_payload(role="brand"))

    assert response.json()["profile"]["role"] == "brand_company"


def test_signup_unknown_role_defaults_to_building_owner(client):
    response = client.post("/api/auth/signup", json=_signup_payload(role="astronaut"))

    assert response.json()["profile"]["role"] == "building_owner"


def test_signup_cannot_claim_admin(client, db_session):
    response = client.post("/api/auth/signup", json=_signup_payload(role="admin"))

    assert response.status_code == 403
    assert db_session.query(User).count() == 0


def test_signup_duplicate_email(client):
    client.post("/api/auth/signup", json=_signup_payload())
    response = client.post("/api/auth/signup", json=_signup_payload(email="owner@example.com"))

    assert response.status_code == 409


def test_login_and_me(client):
    client.post("/api/auth/signup", json=_signup_payload())

    bad = client.post("/api/auth/login", json={"email": "owner@example.com", "password": "wrong"})
    assert bad.status_code == 401

    login = client.post("/api/auth/login", json={"email": "owner@example.com", "password": "abc123"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["first_name"] == "Asha"


def test_logout_revokes_token(client):
    token = client.post("/api/auth/signup", json=_signup_payload()).json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    assert client.post("/api/auth/logout", headers=headers).status_code == 204
    assert client.get("/api/auth/me", headers=headers).status_code == 403


def test_me_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer nonsense"}).status_code == 403


def test_profile_update(client, make_profile, headers_for):
    profile = make_profile()

    response = client.put(
        "/api/profiles/me",
        json={"company_name": "Rao Estates", "phone": "12345"},
        headers=headers_for(profile),
    )

    assert response.status_code == 200
    assert response.json()["company_name"] == "Rao Estates"
    assert response.json()["role"] == "building_owner"


def test_profile_update_rejects_role_change(client, make_profile, headers_for):
    profile = make_profile()

    response = client.put("/api/profiles/me", json={"role": "admin"}, headers=headers_for(profile))

    assert response.status_code == 422


def test_unknown_route_returns_json_error(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}
