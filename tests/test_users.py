"""
User registration, login, profile and role management tests
"""
from app.core.security import decode_access_token, verify_password
from app.db.models import User, UserRole

REGISTRATION = {
    "username": "alice",
    "email": "alice@example.com",
    "password": "wonderland",
    "first_name": "Alice",
    "last_name": "Liddell",
    "phone": "555-0199",
    "address": "2 Rabbit Hole",
}


def test_register_and_login(client, db):
    response = client.post("/api/users/register", json=REGISTRATION)

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["role"] == "user"
    assert "hashed_password" not in user
    assert "password" not in user

    stored = db.query(User).filter(User.email == "alice@example.com").one()
    assert stored.hashed_password != "wonderland"
    assert verify_password("wonderland", stored.hashed_password)

    login = client.post("/api/users/login", json={"email": "alice@example.com", "password": "wonderland"})
    assert login.status_code == 200
    claims = decode_access_token(login.json()["token"])
    assert claims["sub"] == str(stored.id)
    assert claims["role"] == "user"


def test_register_duplicate_email(client):
    client.post("/api/users/register", json=REGISTRATION)

    response = client.post("/api/users/register", json={**REGISTRATION, "username": "alice2"})

    assert response.status_code == 400
    assert response.json()["error"] == "User already exists"


def test_register_duplicate_username(client):
    client.post("/api/users/register", json=REGISTRATION)

    response = client.post("/api/users/register", json={**REGISTRATION, "email": "other@example.com"})

    assert response.status_code == 400
    assert response.json()["error"] == "Username already taken"


def test_login_with_bad_credentials(client, user):
    response = client.post("/api/users/login", json={"email": user.email, "password": "wrong"})

    assert response.status_code == 404
    assert response.json()["error"] == "Invalid email or password"


def test_list_users_is_admin_only(client, user, user_headers, admin_headers):
    assert client.get("/api/users", headers=user_headers).status_code == 403

    response = client.get("/api/users", headers=admin_headers)
    assert response.status_code == 200
    assert {u["username"] for u in response.json()} == {"driver", "boss"}


def test_profile_read_and_update(client, db, user, user_headers):
    response = client.get(f"/api/users/profile/{user.id}", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["email"] == user.email

    updated = client.put(
        f"/api/users/profile/{user.id}",
        json={"phone": "555-0111", "password": "new-secret"},
        headers=user_headers
    )
    assert updated.status_code == 200
    assert updated.json()["user"]["phone"] == "555-0111"

    db.expire_all()
    stored = db.get(User, user.id)
    assert verify_password("new-secret", stored.hashed_password)
    assert stored.first_name == "Driver"

    assert client.get("/api/users/profile/999", headers=user_headers).status_code == 404


def test_grant_and_revoke_admin(client, db, user, user_headers, admin_headers):
    assert client.put(f"/api/users/grantAdmin/{user.id}", headers=user_headers).status_code == 403

    granted = client.put(f"/api/users/grantAdmin/{user.id}", headers=admin_headers)
    assert granted.status_code == 200
    assert granted.json()["user"]["role"] == "admin"
    # the existing token now carries admin rights, roles are read per request
    assert client.get("/api/users", headers=user_headers).status_code == 200

    revoked = client.put(f"/api/users/revokeAdmin/{user.id}", headers=admin_headers)
    assert revoked.json()["user"]["role"] == "user"
    db.expire_all()
    assert db.get(User, user.id).role == UserRole.USER

    assert client.put("/api/users/grantAdmin/999", headers=admin_headers).status_code == 404


def test_token_for_deleted_user_is_rejected(client, db, user, user_headers):
    user_id = user.id
    db.delete(user)
    db.commit()

    response = client.get(f"/api/users/profile/{user_id}", headers=user_headers)

    assert response.status_code == 401
