"""Tests for the generic record store."""
import pytest

from pos.models.category import Category
from pos.models.customer import Customer
from pos.models.user import User
from pos.services.errors import DuplicateKeyError, InvalidRequestError
from pos.services.record_store import RecordStore


@pytest.fixture
def customers(db_session):
    return RecordStore(db_session, Customer)


def test_insert_assigns_id(customers):
    """Test the store assigns identifiers to new records."""
    first = customers.insert({"name": "Ada"})
    second = customers.insert(Customer(name="Grace"))

    assert first.id is not None
    assert second.id > first.id
    assert customers.find_one(id=first.id).name == "Ada"


def test_insert_duplicate_id(db_session):
    """Test inserting an existing identifier fails with DuplicateKeyError."""
    categories = RecordStore(db_session, Category)
    categories.insert(Category(id=7, name="Drinks"))

    with pytest.raises(DuplicateKeyError):
        categories.insert(Category(id=7, name="Snacks"))

    assert [c.name for c in categories.find()] == ["Drinks"]


def test_insert_duplicate_unique_column(db_session):
    users = RecordStore(db_session, User)
    users.insert(User(username="cashier", password_hash="x"))

    with pytest.raises(DuplicateKeyError):
        users.insert(User(username="cashier", password_hash="y"))


def test_find_with_filters_and_order(customers):
    customers.insert({"name": "Carol", "phone": "1"})
    customers.insert({"name": "Alice", "phone": "1"})
    customers.insert({"name": "Bob", "phone": "2"})

    assert [c.name for c in customers.find(phone="1", order_by=Customer.name)] == ["Alice", "Carol"]
    assert [c.name for c in customers.find(Customer.phone != "1")] == ["Bob"]
    assert customers.find(name="Nobody") == []
    assert customers.find_one(name="Nobody") is None


def test_partial_update(customers):
    """Test a patch only changes the given fields."""
    customer = customers.insert({"name": "Ada", "phone": "555", "email": "ada@example.com"})

    count = customers.update({"id": customer.id}, {"phone": "777"})

    updated = customers.find_one(id=customer.id)
    assert count == 1
    assert updated.phone == "777"
    assert updated.email == "ada@example.com"


def test_replace_update(customers):
    """Test a replace resets fields missing from the new record."""
    customer = customers.insert({"name": "Ada", "phone": "555", "email": "ada@example.com"})

    customers.update({"id": customer.id}, {"name": "Ada L."}, replace=True)

    replaced = customers.find_one(id=customer.id)
    assert replaced.name == "Ada L."
    assert replaced.phone == ""
    assert replaced.email == ""
    assert replaced.created_at is not None


def test_update_missing_record_returns_zero(customers):
    assert customers.update({"id": 404}, {"phone": "1"}) == 0


def test_update_unknown_field(customers):
    customer = customers.insert({"name": "Ada"})

    with pytest.raises(InvalidRequestError):
        customers.update({"id": customer.id}, {"shoe_size": 38})


def test_remove(customers):
    customer = customers.insert({"name": "Ada"})

    assert customers.remove({"id": customer.id}) == 1
    assert customers.remove({"id": customer.id}) == 0
    assert customers.find() == []
