import pytest


def test_signup_hides_password(client):
    response = client.post("/api/auth/signup", json={
        "email": "ines@ekrili.tn",
        "password": "MotDePasse123",
        "first_name": "Ines",
        "last_name": "Trabelsi",
        "role": "both",
    })
    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert body["id"] == 5  # after the four seeded owners
    assert body["is_verified"] is False
    assert body["language"] == "fr"


def test_signup_duplicate_email(client, signup):
    signup("dup@ekrili.tn")
    response = client.post("/api/auth/signup", json={
        "email": "dup@ekrili.tn",
        "password": "x",
        "first_name": "A",
        "last_name": "B",
    })
    assert response.status_code == 400


def test_signup_invalid_payload(client):
    response = client.post("/api/auth/signup", json={"email": "not-an-email"})
    assert response.status_code == 422


def test_login_and_me(client, signup):
    user, headers = signup("sami@ekrili.tn")
    response = client.get("/api/auth/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["email"] == "sami@ekrili.tn"
    assert response.json()["id"] == user["id"]


def test_login_wrong_password(client, signup):
    signup("sami@ekrili.tn")
    response = client.post("/api/auth/login", json={"email": "sami@ekrili.tn", "password": "wrong"})
    assert response.status_code == 401


def test_login_unknown_user(client):
    response = client.post("/api/auth/login", json={"email": "nobody@ekrili.tn", "password": "x"})
    assert response.status_code == 401


def test_seeded_accounts_cannot_log_in(client):
    response = client.post("/api/auth/login", json={
        "email": "ahmed.khaled@email.com", "password": "hashed_password",
    })
    assert response.status_code == 401


def test_me_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401
    bad = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert bad.status_code == 401


def test_update_profile(client, signup):
    _, headers = signup("sami@ekrili.tn")
    response = client.patch("/api/users/me", json={"language": "en", "phone": "+216 50 111 222"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["language"] == "en"
    assert response.json()["phone"] == "+216 50 111 222"


def test_public_profile(client):
    response = client.get("/api/users/1")
    assert response.status_code == 200
    assert response.json()["first_name"] == "Ahmed"
    assert "password" not in response.json()
    assert client.get("/api/users/999").status_code == 404


@pytest.mark.parametrize("payload", [
    {"first_name": None},
    {"last_name": None},
    {"role": None},
    {"language": None},
    {"first_name": ""},
    {"language": "de"},
])
def test_update_profile_rejects_invalid_fields(client, signup, payload):
    _, headers = signup("sami@ekrili.tn")
    response = client.patch("/api/users/me", json=payload, headers=headers)
    assert response.status_code == 422

    me = client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["first_name"] == "Test"
    assert me.json()["language"] == "fr"


def test_update_profile_can_clear_phone(client, signup):
    _, headers = signup("sami@ekrili.tn")
    client.patch("/api/users/me", json={"phone": "+216 50 111 222"}, headers=headers)

    response = client.patch("/api/users/me", json={"phone": None}, headers=headers)
    assert response.status_code == 200
    assert response.json()["phone"] is None
    assert client.get("/api/auth/me", headers=headers).status_code == 200
