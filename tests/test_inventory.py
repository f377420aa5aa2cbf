"""Tests for Inventory (product) API endpoints."""


def test_create_product(client):
    """Test creating a new product."""
    response = client.post(
        "/api/v1/inventory/product",
        json={
            "name": "Test Product",
            "price": 99.99,
            "quantity": 10,
            "sku": "TP-001"
        }
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Test Product"
    assert data["price"] == 99.99
    assert data["quantity"] == 10
    assert data["stock_tracked"] is True
    assert "id" in data
    assert "created_at" in data


def test_create_product_without_quantity(client):
    """Test a product can be stored with no count at all."""
    response = client.post(
        "/api/v1/inventory/product",
        json={"name": "Gift Wrap", "price": 1.00, "quantity": None, "stock_tracked": False}
    )
    default = client.post("/api/v1/inventory/product", json={"name": "Counted", "price": 1.00})

    assert response.status_code == 200
    assert response.json()["quantity"] is None
    assert client.post(
        "/api/v1/inventory/byId", json={"id": response.json()["id"]}
    ).json()["quantity"] is None
    assert default.json()["quantity"] == 0


def test_create_product_negative_quantity(client):
    """Test creating product with negative stock fails."""
    response = client.post(
        "/api/v1/inventory/product",
        json={"name": "Test Product", "price": 5.00, "quantity": -5}
    )

    assert response.status_code == 422


def test_get_product(client, create_product):
    """Test getting a product by ID."""
    product = create_product(name="Coffee")

    response = client.get(f"/api/v1/inventory/product/{product['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == product["id"]
    assert data["name"] == "Coffee"


def test_get_product_not_found(client):
    """Test getting non-existent product returns 404."""
    response = client.get("/api/v1/inventory/product/9999")

    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_get_product_by_id_post(client, create_product):
    product = create_product(name="Tea")

    response = client.post("/api/v1/inventory/byId", json={"id": product["id"]})
    missing_id = client.post("/api/v1/inventory/byId", json={})

    assert response.status_code == 200
    assert response.json()["name"] == "Tea"
    assert missing_id.status_code == 400


def test_list_products(client, create_product):
    for i in range(3):
        create_product(name=f"Product {i}")

    response = client.get("/api/v1/inventory/products")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Product 0", "Product 1", "Product 2"]


def test_list_products_with_category_names(client, create_product):
    """Test the management listing joins category names."""
    category = client.post("/api/v1/categories/category", json={"name": "Drinks"}).json()
    create_product(name="Soda", category=category["id"])
    create_product(name="Loose", category=None)

    response = client.get("/api/v1/inventory/all")

    assert response.status_code == 200
    names = {p["name"]: p["category_name"] for p in response.json()}
    assert names == {"Soda": "Drinks", "Loose": "N/A"}


def test_replace_product(client, create_product):
    """Test saving with an ID replaces the product."""
    product = create_product(name="Original Name", price=50.00, quantity=10, sku="OLD")

    response = client.post(
        "/api/v1/inventory/product",
        json={"id": product["id"], "name": "Updated Name", "price": 75.00, "quantity": 10}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == product["id"]
    assert data["name"] == "Updated Name"
    assert data["price"] == 75.00
    assert data["sku"] == ""


def test_replace_missing_product(client):
    response = client.post(
        "/api/v1/inventory/product",
        json={"id": 9999, "name": "Nothing"}
    )

    assert response.status_code == 404


def test_find_by_sku(client, create_product):
    product = create_product(name="Scanner Item", sku="8901234")
    no_sku = create_product(name="No SKU")

    by_sku = client.post("/api/v1/inventory/product/sku", json={"skuCode": "8901234"})
    by_id = client.post("/api/v1/inventory/product/sku", json={"skuCode": str(no_sku["id"])})
    missing = client.post("/api/v1/inventory/product/sku", json={"skuCode": "nothing"})

    assert by_sku.json()["id"] == product["id"]
    assert by_id.json()["id"] == no_sku["id"]
    assert missing.json() == {}


def test_update_stock(client, create_product):
    """Test manual stock counts overwrite the quantity."""
    product = create_product(quantity=3)

    response = client.post(
        "/api/v1/inventory/update-stock",
        json={"id": product["id"], "quantity": 12, "reason": "Stock take"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Stock updated successfully",
        "new_quantity": 12
    }
    assert client.post("/api/v1/inventory/byId", json={"id": product["id"]}).json()["quantity"] == 12


def test_update_stock_errors(client):
    missing_fields = client.post("/api/v1/inventory/update-stock", json={"id": 1})
    missing_product = client.post("/api/v1/inventory/update-stock", json={"id": 9999, "quantity": 1})

    assert missing_fields.status_code == 400
    assert missing_product.status_code == 404


def test_delete_product(client, create_product):
    """Test deleting a product."""
    product = create_product(name="To Delete")

    response = client.delete(f"/api/v1/inventory/product/{product['id']}")
    assert response.status_code == 204

    # Verify it's deleted
    get_response = client.get(f"/api/v1/inventory/product/{product['id']}")
    assert get_response.status_code == 404


def test_delete_product_by_body(client, create_product):
    product = create_product(name="To Delete")

    response = client.post("/api/v1/inventory/delete", json={"id": product["id"]})
    again = client.post("/api/v1/inventory/delete", json={"id": product["id"]})

    assert response.json() == {"success": True}
    assert again.status_code == 404
