import logging
from collections import Counter

from pos.tasks.celery_app import celery_app
from pos.database import SessionLocal
from pos.models.product import Product
from pos.services.record_store import RecordStore
from pos.services.stock_ledger import StockLedger

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name="decrement_inventory")
def decrement_inventory(self, items: list) -> dict:
    """
    Background task taking a completed sale off stock.

    Items ({"id", "quantity"}) are applied one after the other. Unknown or
    untracked products are skipped; a failing item is logged and the
    remaining items are still processed. Not retried: items already
    applied would be decremented twice.

    Args:
        items: Sold product IDs and quantities

    Returns:
        Count of items per outcome
    """
    logger.info(f"Task {self.request.id}: decrementing inventory for {len(items)} sold item(s)")

    db = SessionLocal()

    try:
        ledger = StockLedger(RecordStore(db, Product))
        adjustments = ledger.decrement_many(items)

        outcomes = Counter(a.outcome.value for a in adjustments)
        logger.info(f"Inventory decrement finished: {dict(outcomes)}")

        return {"status": "success", "outcomes": dict(outcomes)}

    finally:
        db.close()
