import bcrypt

from taskflow.core.ids import new_document_id
from taskflow.models.user import User


def password_matches(user, password):
    return bcrypt.checkpw(password.encode(), user.password_hash.encode())


def user_payload(**fields):
    payload = {"username": "john_doe", "email": "john@example.com", "password": "SecurePassword123!"}
    payload.update(fields)
    return payload


def create_user(client, **fields):
    response = client.post("/api/users", json=user_payload(**fields))
    assert response.status_code == 201
    return response.json()


# ========== CREATE ==========
def test_create_user_success(client):
    data = create_user(client)
    assert data["username"] == "john_doe"
    assert data["email"] == "john@example.com"
    assert data["avatar"] is None
    assert data["settings"] == {"theme": "light", "notifications": True}
    assert "password" not in data
    assert "password_hash" not in data

def test_create_user_password_is_hashed(client, db):
    data = create_user(client)
    user = db.query(User).filter(User.id == data["_id"]).first()
    assert user.password_hash != "SecurePassword123!"
    assert password_matches(user, "SecurePassword123!")
    assert not password_matches(user, "wrong")

def test_create_user_missing_fields(client):
    for field in ("username", "email", "password"):
        payload = user_payload()
        del payload[field]
        response = client.post("/api/users", json=payload)
        assert response.status_code == 400
        assert "error" in response.json()

def test_create_user_empty_email(client):
    assert client.post("/api/users", json=user_payload(email="")).status_code == 400

def test_create_user_email_format_not_checked(client):
    assert client.post("/api/users", json=user_payload(email="pas-un-email")).status_code == 201

def test_create_user_duplicate_email(client):
    create_user(client)
    response = client.post("/api/users", json=user_payload(username="autre"))
    assert response.status_code == 400
    assert response.json() == {"error": "Email already exists"}

def test_duplicate_email_checked_before_validation(client):
    """L'email déjà pris l'emporte sur les autres erreurs du body"""
    create_user(client, email="dup@example.com")

    response = client.post("/api/users", json={"username": "b", "email": "dup@example.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "Email already exists"}

    response = client.post("/api/users", json={"username": "", "email": "dup@example.com", "password": "x"})
    assert response.json() == {"error": "Email already exists"}

def test_create_user_validation_error_format(client):
    response = client.post("/api/users", json={"username": "b", "email": "new@example.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "Validation failed: password: Field required"}

def test_email_uniqueness_is_case_sensitive(client):
    create_user(client, email="Test@Example.com")
    data = create_user(client, email="test@example.com")
    assert data["email"] == "test@example.com"


# ========== LIST / GET ==========
def test_list_users_without_password_newest_first(client):
    first = create_user(client, email="user1@example.com")
    second = create_user(client, email="user2@example.com")

    response = client.get("/api/users")
    assert response.status_code == 200
    data = response.json()
    assert [u["_id"] for u in data] == [second["_id"], first["_id"]]
    assert all("password" not in u for u in data)

def test_get_user_without_password(client):
    user = create_user(client)
    response = client.get(f"/api/users/{user['_id']}")
    assert response.status_code == 200
    assert response.json()["_id"] == user["_id"]
    assert "password" not in response.json()

def test_get_user_errors(client):
    response = client.get(f"/api/users/{new_document_id()}")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
    assert client.get("/api/users/invalid-id-format").status_code == 500


# ========== UPDATE ==========
def test_update_user_preserves_fields(client):
    user = create_user(client, avatar="https://example.com/original.jpg")

    response = client.put(f"/api/users/{user['_id']}", json={"username": "new_name"})
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "new_name"
    assert data["email"] == "john@example.com"
    assert data["avatar"] == "https://example.com/original.jpg"
    assert data["createdAt"] == user["createdAt"]
    assert "password" not in data

def test_update_user_settings_merge(client):
    user = create_user(client)

    data = client.put(f"/api/users/{user['_id']}", json={"settings": {"theme": "dark"}}).json()
    assert data["settings"] == {"theme": "dark", "notifications": True}

    data = client.put(f"/api/users/{user['_id']}", json={"settings": {"notifications": False}}).json()
    assert data["settings"] == {"theme": "dark", "notifications": False}

def test_update_user_password(client, db):
    user = create_user(client)
    response = client.put(f"/api/users/{user['_id']}", json={"password": "NewPassword!"})
    assert response.status_code == 200
    assert "password" not in response.json()

    stored = db.query(User).filter(User.id == user["_id"]).first()
    assert password_matches(stored, "NewPassword!")

def test_update_user_errors(client):
    response = client.put(f"/api/users/{new_document_id()}", json={"username": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
    assert client.put("/api/users/invalid-id", json={"username": "x"}).status_code == 400


# ========== DELETE ==========
def test_delete_user(client):
    user = create_user(client)
    response = client.delete(f"/api/users/{user['_id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    assert client.get(f"/api/users/{user['_id']}").status_code == 404

def test_delete_user_errors(client):
    response = client.delete(f"/api/users/{new_document_id()}")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
    assert client.delete("/api/users/invalid-id").status_code == 500
