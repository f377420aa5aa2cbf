"""Tests for User API endpoints."""


def create_user(client, **overrides):
    payload = {"username": "cashier", "password": "s3cret", "fullname": "Till Operator", "perm_products": True}
    payload.update(overrides)
    return client.post("/api/v1/users/post", json=payload)


def find_admin(client):
    return next(u for u in client.get("/api/v1/users/all").json() if u["is_admin"])


def test_check_creates_default_admin_once(client):
    first = client.get("/api/v1/users/check")
    second = client.get("/api/v1/users/check")

    assert first.json() == {"created": True}
    assert second.json() == {"created": False}

    admin = find_admin(client)
    assert admin["username"] == "admin"
    assert admin["perm_settings"] is True


def test_check_after_users_already_exist(client):
    """Test the admin is still seeded when a user was created first."""
    cashier = create_user(client).json()

    check = client.get("/api/v1/users/check")
    login = client.post("/api/v1/users/login", json={"username": "admin", "password": "admin"})

    assert check.json() == {"created": True}
    assert login.status_code == 200
    assert login.json()["is_admin"] is True
    assert cashier["is_admin"] is False
    assert client.delete(f"/api/v1/users/user/{cashier['id']}").status_code == 204


def test_create_user_hides_password(client):
    response = create_user(client)

    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "cashier"
    assert data["perm_products"] is True
    assert data["perm_users"] is False
    assert "password" not in data
    assert "password_hash" not in data


def test_duplicate_username(client):
    create_user(client)

    response = create_user(client, fullname="Someone Else")

    assert response.status_code == 409


def test_login(client):
    """Test login checks the password and stamps the user status."""
    create_user(client)

    response = client.post("/api/v1/users/login", json={"username": "cashier", "password": "s3cret"})

    assert response.status_code == 200
    assert response.json()["status"].startswith("Logged In_")


def test_login_wrong_password(client):
    create_user(client)

    response = client.post("/api/v1/users/login", json={"username": "cashier", "password": "guess"})
    unknown = client.post("/api/v1/users/login", json={"username": "nobody", "password": "guess"})

    assert response.status_code == 401
    assert unknown.status_code == 401
    assert response.json() == {"error": "Invalid username or password"}


def test_logout(client):
    user = create_user(client).json()

    response = client.get(f"/api/v1/users/logout/{user['id']}")

    assert response.status_code == 200
    assert client.get(f"/api/v1/users/user/{user['id']}").json()["status"].startswith("Logged Out_")
    assert client.get("/api/v1/users/logout/9999").status_code == 404


def test_update_user_changes_password(client):
    user = create_user(client).json()

    response = create_user(client, id=user["id"], password="n3w", fullname="Renamed")

    assert response.status_code == 200
    assert response.json()["fullname"] == "Renamed"
    assert client.post(
        "/api/v1/users/login", json={"username": "cashier", "password": "s3cret"}
    ).status_code == 401
    assert client.post(
        "/api/v1/users/login", json={"username": "cashier", "password": "n3w"}
    ).status_code == 200


def test_update_missing_user(client):
    response = create_user(client, id=9999)

    assert response.status_code == 404


def test_delete_user(client):
    user = create_user(client).json()

    response = client.delete(f"/api/v1/users/user/{user['id']}")

    assert response.status_code == 204
    assert [u["username"] for u in client.get("/api/v1/users/all").json()] == []


def test_cannot_delete_admin(client):
    client.get("/api/v1/users/check")
    admin = find_admin(client)

    response = client.delete(f"/api/v1/users/user/{admin['id']}")

    assert response.status_code == 403
    assert response.json() == {"error": "Cannot delete admin user"}


def test_delete_missing_user(client):
    assert client.delete("/api/v1/users/user/9999").status_code == 404
