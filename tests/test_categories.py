"""Tests for Category API endpoints."""


def test_create_and_list_categories(client):
    response = client.post("/api/v1/categories/category", json={"name": "Drinks"})
    client.post("/api/v1/categories/category", json={"name": "Bakery"})

    assert response.status_code == 201
    assert response.json()["name"] == "Drinks"
    assert [c["name"] for c in client.get("/api/v1/categories/all").json()] == ["Bakery", "Drinks"]


def test_create_category_requires_name(client):
    response = client.post("/api/v1/categories/category", json={"name": ""})

    assert response.status_code == 422


def test_update_category(client):
    category = client.post("/api/v1/categories/category", json={"name": "Drinks"}).json()

    response = client.put("/api/v1/categories/category", json={"id": category["id"], "name": "Beverages"})
    missing = client.put("/api/v1/categories/category", json={"id": 9999, "name": "Nope"})

    assert response.status_code == 200
    assert response.json()["name"] == "Beverages"
    assert missing.status_code == 404
    assert missing.json() == {"error": "Category not found"}


def test_delete_category(client):
    category = client.post("/api/v1/categories/category", json={"name": "Drinks"}).json()

    response = client.delete(f"/api/v1/categories/category/{category['id']}")
    again = client.delete(f"/api/v1/categories/category/{category['id']}")

    assert response.status_code == 204
    assert again.status_code == 404
    assert client.get("/api/v1/categories/all").json() == []
