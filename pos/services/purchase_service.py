from dataclasses import dataclass, field
from typing import List
import logging

from pos.models.purchase import Purchase
from pos.schemas.purchase import LineItem, PurchaseCreate
from pos.services.errors import InvalidRequestError, NotFoundError
from pos.services.record_store import RecordStore
from pos.services.stock_ledger import (
    StockAdjustment,
    StockLedger,
    StockOutcome,
    parse_positive_int,
)

logger = logging.getLogger(__name__)


@dataclass
class PurchaseResult:
    """A stored purchase and the stock outcome of each of its line items."""
    purchase: Purchase
    adjustments: List[StockAdjustment] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        return [a.message for a in self.adjustments if not a.ok]


class PurchaseService:
    """
    Service class for supplier purchases and the stock they bring in.

    STOCK RECONCILIATION:
    =====================
    Recording a purchase is N+1 independent writes: the purchase record,
    then one quantity update per line item. There is no transaction
    spanning them.

    1. The purchase is inserted first. If that fails nothing else happens.
    2. Line items are applied one at a time, each lookup+update finishing
       before the next item starts, so a product listed twice gets both
       quantities.
    3. A failing line item is recorded as a warning and the loop moves on.
       The purchase itself is kept: it is the audit trail, stock
       correctness is best-effort and fixed by hand.

    Deleting a purchase leaves stock untouched for the same reason.
    """

    def __init__(self, purchases: RecordStore[Purchase], ledger: StockLedger):
        self.purchases = purchases
        self.ledger = ledger

    def add_purchase(self, purchase_data: PurchaseCreate) -> PurchaseResult:
        """
        Record a purchase and add its quantities to stock.

        Args:
            purchase_data: Supplier, line items, optional total and notes

        Returns:
            The stored purchase with per-item stock outcomes

        Raises:
            InvalidRequestError: If supplier or items are missing
            PersistenceError: If the purchase can't be stored
        """
        supplier = (purchase_data.supplier or "").strip()
        items = purchase_data.items or []

        if not supplier or not items:
            raise InvalidRequestError("Supplier and items are required")

        purchase = self.purchases.insert(
            Purchase(
                supplier=supplier,
                items=[item.model_dump(by_alias=True) for item in items],
                total_amount=purchase_data.total_amount or 0.0,
                notes=purchase_data.notes or "",
            )
        )
        logger.info(f"Purchase #{purchase.id} from '{supplier}' recorded with {len(items)} item(s)")

        result = PurchaseResult(purchase)
        for item in items:
            result.adjustments.append(self._receive(item))

        for warning in result.warnings:
            logger.warning(f"Purchase #{purchase.id}: {warning}")

        return result

    def _receive(self, item: LineItem) -> StockAdjustment:
        """Apply one line item to stock."""
        product_id = parse_positive_int(item.product_id)
        quantity = parse_positive_int(item.quantity)
        name = item.product_name or str(item.product_id)

        if product_id is None or quantity is None:
            return StockAdjustment(
                product_id, name, StockOutcome.INVALID,
                message=f"Invalid product id/quantity for {name}"
            )

        return self.ledger.increment(product_id, quantity, item.product_name)

    def get_purchases(self) -> List[Purchase]:
        """Get all purchases, newest first."""
        return self.purchases.find(
            order_by=[Purchase.created_at.desc(), Purchase.id.desc()]
        )

    def get_purchase(self, purchase_id: int) -> Purchase:
        """Get a purchase by ID."""
        purchase = self.purchases.find_one(id=purchase_id)

        if not purchase:
            raise NotFoundError("Purchase not found")

        return purchase

    def delete_purchase(self, purchase_id: int) -> None:
        """Delete a purchase record. Stock is not reversed."""
        removed = self.purchases.remove({"id": purchase_id})

        if not removed:
            raise NotFoundError("Purchase not found")

        logger.info(f"Purchase #{purchase_id} deleted (stock unchanged)")

    def get_stats(self) -> dict:
        """
        Summarize purchases.

        Returns:
            Dict with total_purchases, total_amount and supplier_stats
            (supplier -> {count, total_amount})
        """
        purchases = self.purchases.find()

        supplier_stats = {}
        for purchase in purchases:
            stats = supplier_stats.setdefault(
                purchase.supplier, {"count": 0, "total_amount": 0.0}
            )
            stats["count"] += 1
            stats["total_amount"] += purchase.total_amount or 0.0

        return {
            "total_purchases": len(purchases),
            "total_amount": sum(p.total_amount or 0.0 for p in purchases),
            "supplier_stats": supplier_stats,
        }
