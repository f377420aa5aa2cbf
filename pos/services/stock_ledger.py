from dataclasses import dataclass
from typing import Any, Iterable, List, Optional
import enum
import logging

from pos.models.product import Product
from pos.services.errors import PersistenceError
from pos.services.record_store import RecordStore
from pos.utils.cache import CacheService, cache_service

logger = logging.getLogger(__name__)


class StockOutcome(str, enum.Enum):
    """Result of applying one quantity change to a product."""
    APPLIED = "applied"
    SKIPPED = "skipped"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    NOT_MODIFIED = "not_modified"
    FAILED = "failed"


@dataclass
class StockAdjustment:
    product_id: Optional[int]
    product_name: str
    outcome: StockOutcome
    old_quantity: Optional[int] = None
    new_quantity: Optional[int] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome in (StockOutcome.APPLIED, StockOutcome.SKIPPED)


def parse_positive_int(value: Any) -> Optional[int]:
    """
    Parse a strictly positive integer from a request value.

    Accepts ints, integral floats and numeric strings. Returns None for
    anything else (booleans, blanks, fractions, zero, negatives).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if not isinstance(value, int) or value <= 0:
        return None
    return value


class StockLedger:
    """
    Quantity on hand per product, stored on Product.quantity.

    Each adjustment is a lookup followed by a partial update of the
    quantity column. Callers wanting several adjustments must apply them
    one after the other: two changes to the same product in flight at once
    would lose one of the deltas.
    """

    CACHE_PREFIX = "product"

    def __init__(self, products: RecordStore[Product], cache: CacheService = None):
        self.products = products
        self.cache = cache or cache_service

    def quantity_of(self, product_id: int) -> Optional[int]:
        """Current quantity, or None for unknown products."""
        product = self.products.find_one(id=product_id)
        return product.quantity if product else None

    def increment(self, product_id: int, quantity: int, product_name: str = "") -> StockAdjustment:
        """
        Add received units to a product.

        A missing quantity counts as 0. Failures are returned as an
        adjustment with a non-applied outcome, never raised.
        """
        label = product_name or f"#{product_id}"

        try:
            product = self.products.find_one(id=product_id)
        except PersistenceError:
            return StockAdjustment(
                product_id, label, StockOutcome.FAILED,
                message=f"Failed to look up product {label}"
            )

        if product is None:
            return StockAdjustment(
                product_id, label, StockOutcome.NOT_FOUND,
                message=f"Product {label} not found"
            )

        label = product_name or product.name
        old_quantity = product.quantity if isinstance(product.quantity, int) else 0
        new_quantity = old_quantity + quantity

        return self._write(product_id, label, old_quantity, new_quantity)

    def decrement(self, product_id: int, quantity: int) -> StockAdjustment:
        """
        Remove sold units from a product, clamping at zero.

        Unknown and untracked products are skipped.
        """
        product = self.products.find_one(id=product_id)

        if product is None or not product.stock_tracked or product.quantity is None:
            logger.info(f"Product {product_id} - no stock tracking or not found")
            return StockAdjustment(product_id, "", StockOutcome.SKIPPED)

        old_quantity = product.quantity
        new_quantity = max(0, old_quantity - quantity)

        return self._write(product_id, product.name, old_quantity, new_quantity)

    def decrement_many(self, items: Iterable[dict]) -> List[StockAdjustment]:
        """
        Apply a completed sale to stock.

        Items ({"id", "quantity"}) are processed in order, each one finishing
        before the next starts. A failing item is logged and the rest still run.
        """
        adjustments = []

        for item in items:
            product_id = parse_positive_int(item.get("id"))
            quantity = parse_positive_int(item.get("quantity"))

            if product_id is None or quantity is None:
                logger.warning(f"Skipping sold item with invalid id/quantity: {item}")
                adjustments.append(
                    StockAdjustment(product_id, "", StockOutcome.INVALID,
                                    message="Invalid product id/quantity")
                )
                continue

            try:
                adjustment = self.decrement(product_id, quantity)
            except PersistenceError as e:
                logger.error(f"Error decrementing stock for product {product_id}: {e}")
                adjustment = StockAdjustment(
                    product_id, "", StockOutcome.FAILED, message=str(e)
                )
            else:
                if adjustment.outcome is StockOutcome.APPLIED:
                    logger.info(
                        f"Inventory decremented: {adjustment.product_name} - {quantity} units"
                    )
                elif not adjustment.ok:
                    logger.error(f"Error decrementing stock for product {product_id}: {adjustment.message}")

            adjustments.append(adjustment)

        return adjustments

    def set_quantity(self, product_id: int, quantity: int) -> int:
        """Overwrite the quantity (manual stock count). Returns records modified."""
        count = self.products.update({"id": product_id}, {"quantity": quantity})
        if count:
            self._invalidate_cache(product_id)
        return count

    def _write(self, product_id: int, label: str, old_quantity: int, new_quantity: int) -> StockAdjustment:
        try:
            count = self.products.update({"id": product_id}, {"quantity": new_quantity})
        except PersistenceError:
            return StockAdjustment(
                product_id, label, StockOutcome.FAILED, old_quantity,
                message=f"Failed to update stock for {label}"
            )

        if count == 0:
            return StockAdjustment(
                product_id, label, StockOutcome.NOT_MODIFIED, old_quantity,
                message=f"Stock for {label} was not updated"
            )

        self._invalidate_cache(product_id)
        logger.info(f"Stock for product #{product_id} ({label}): {old_quantity} -> {new_quantity}")

        return StockAdjustment(product_id, label, StockOutcome.APPLIED, old_quantity, new_quantity)

    def _invalidate_cache(self, product_id: int) -> None:
        self.cache.delete(self.CACHE_PREFIX, str(product_id))
