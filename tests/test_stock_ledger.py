"""Tests for the stock ledger (purchase increments and sale decrements)."""
from unittest.mock import MagicMock

import pytest

from pos.models.category import Category
from pos.models.product import Product
from pos.services.errors import PersistenceError
from pos.services.product_service import ProductService
from pos.services.record_store import RecordStore
from pos.services.stock_ledger import StockLedger, StockOutcome, parse_positive_int
from pos.utils.cache import CacheService


@pytest.fixture
def products(db_session):
    return RecordStore(db_session, Product)


@pytest.fixture
def ledger(products):
    return StockLedger(products, cache=CacheService(enabled=False))


def add_product(products, **values):
    values.setdefault("name", "Widget")
    return products.insert(Product(**values))


def test_decrement_reduces_stock(ledger, products):
    """Test selling 3 of 5 leaves 2."""
    product = add_product(products, quantity=5)

    adjustment = ledger.decrement(product.id, 3)

    assert adjustment.outcome is StockOutcome.APPLIED
    assert (adjustment.old_quantity, adjustment.new_quantity) == (5, 2)
    assert ledger.quantity_of(product.id) == 2


def test_decrement_clamps_at_zero(ledger, products):
    """Test selling more than is in stock never goes negative."""
    product = add_product(products, quantity=5)

    adjustment = ledger.decrement(product.id, 10)

    assert adjustment.new_quantity == 0
    assert ledger.quantity_of(product.id) == 0


def test_decrement_skips_untracked_products(ledger, products):
    """Test untracked products and products without a quantity are left alone."""
    untracked = add_product(products, quantity=7, stock_tracked=False)
    uncounted = add_product(products, quantity=None)

    assert ledger.decrement(untracked.id, 2).outcome is StockOutcome.SKIPPED
    assert ledger.decrement(uncounted.id, 2).outcome is StockOutcome.SKIPPED
    assert ledger.decrement(9999, 2).outcome is StockOutcome.SKIPPED
    assert ledger.quantity_of(untracked.id) == 7
    assert ledger.quantity_of(uncounted.id) is None


def test_decrement_many_applies_in_order(ledger, products):
    """Test a sale with repeated and invalid items."""
    first = add_product(products, name="First", quantity=10)
    second = add_product(products, name="Second", quantity=1)

    adjustments = ledger.decrement_many([
        {"id": first.id, "quantity": 4},
        {"id": "not-a-number", "quantity": 1},
        {"id": first.id, "quantity": "3"},
        {"id": second.id, "quantity": 5},
    ])

    assert [a.outcome for a in adjustments] == [
        StockOutcome.APPLIED,
        StockOutcome.INVALID,
        StockOutcome.APPLIED,
        StockOutcome.APPLIED,
    ]
    assert ledger.quantity_of(first.id) == 3
    assert ledger.quantity_of(second.id) == 0


def test_decrement_many_continues_after_failure():
    """Test a store failure on one item doesn't stop the others."""
    store = MagicMock()
    store.find_one.side_effect = [
        PersistenceError("database is locked"),
        Product(id=2, name="Second", quantity=5, stock_tracked=True),
    ]
    store.update.return_value = 1
    ledger = StockLedger(store, cache=CacheService(enabled=False))

    adjustments = ledger.decrement_many([{"id": 1, "quantity": 1}, {"id": 2, "quantity": 2}])

    assert adjustments[0].outcome is StockOutcome.FAILED
    assert adjustments[1].outcome is StockOutcome.APPLIED
    store.update.assert_called_once_with({"id": 2}, {"quantity": 3})


def test_increment_adds_to_stock(ledger, products):
    product = add_product(products, name="Rice", quantity=2)

    adjustment = ledger.increment(product.id, 8)

    assert adjustment.ok
    assert adjustment.product_name == "Rice"
    assert ledger.quantity_of(product.id) == 10


def test_increment_unknown_product(ledger):
    adjustment = ledger.increment(404, 1, "Ghost")

    assert adjustment.outcome is StockOutcome.NOT_FOUND
    assert adjustment.message == "Product Ghost not found"


def test_increment_reports_unmodified_update():
    """Test an update touching no rows is a soft failure, not an exception."""
    store = MagicMock()
    store.find_one.return_value = Product(id=1, name="Rice", quantity=3)
    store.update.return_value = 0
    ledger = StockLedger(store, cache=CacheService(enabled=False))

    adjustment = ledger.increment(1, 2)

    assert adjustment.outcome is StockOutcome.NOT_MODIFIED
    assert not adjustment.ok
    assert adjustment.old_quantity == 3


def test_increment_reports_failed_write():
    store = MagicMock()
    store.find_one.return_value = Product(id=1, name="Rice", quantity=3)
    store.update.side_effect = PersistenceError("disk full")
    ledger = StockLedger(store, cache=CacheService(enabled=False))

    adjustment = ledger.increment(1, 2)

    assert adjustment.outcome is StockOutcome.FAILED
    assert adjustment.message == "Failed to update stock for Rice"


def test_set_quantity(ledger, products):
    product = add_product(products, quantity=2)

    assert ledger.set_quantity(product.id, 40) == 1
    assert ledger.set_quantity(9999, 40) == 0
    assert ledger.quantity_of(product.id) == 40


def test_stock_change_invalidates_cache(products):
    """Test the cached product entry is dropped when stock moves."""
    cache = MagicMock()
    ledger = StockLedger(products, cache=cache)
    product = add_product(products, quantity=2)

    ledger.increment(product.id, 1)

    cache.delete.assert_called_once_with("product", str(product.id))


def test_product_service_uses_ledger_cache(products, db_session):
    """Test product reads and deletes go through the same cache as stock changes."""
    cache = MagicMock()
    cache.get.return_value = None
    ledger = StockLedger(products, cache=cache)
    service = ProductService(products, RecordStore(db_session, Category), ledger)
    product = add_product(products, quantity=2)

    service.get_by_id_cached(product.id)
    service.delete(product.id)

    cache.get.assert_called_once_with("product", str(product.id))
    cache.set.assert_called_once()
    cache.delete.assert_called_once_with("product", str(product.id))


@pytest.mark.parametrize("value, expected", [
    (3, 3),
    ("7", 7),
    (" 12 ", 12),
    (4.0, 4),
    (0, None),
    (-2, None),
    (2.5, None),
    ("abc", None),
    ("", None),
    (None, None),
    (True, None),
])
def test_parse_positive_int(value, expected):
    assert parse_positive_int(value) == expected
