from datetime import datetime
from typing import List, Optional, Tuple
import logging

from pos.models.transaction import Transaction, TransactionStatus
from pos.schemas.transaction import TransactionCreate, TransactionUpdate
from pos.services.errors import InvalidRequestError, NotFoundError
from pos.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def sold_items(transaction: Transaction) -> List[dict]:
    """The {id, quantity} pairs handed to the stock decrement task."""
    return [
        {"id": item["id"], "quantity": item["quantity"]}
        for item in transaction.items or []
    ]


class TransactionService:
    """
    Service class for sales transactions.

    Creating or updating a transaction reports whether the sale should now
    come off stock. That happens once, when the transaction first becomes
    fully paid (paid >= total); partial payments never touch stock.
    """

    def __init__(self, transactions: RecordStore[Transaction]):
        self.transactions = transactions

    def get_all(self) -> List[Transaction]:
        return self.transactions.find(order_by=[Transaction.date.desc(), Transaction.id.desc()])

    def get_by_id(self, transaction_id: int) -> Transaction:
        transaction = self.transactions.find_one(id=transaction_id)

        if not transaction:
            raise NotFoundError("Transaction not found")

        return transaction

    def get_on_hold(self) -> List[Transaction]:
        """Open orders parked under a reference number."""
        return self.transactions.find(
            Transaction.ref_number != "",
            status=TransactionStatus.OPEN,
            order_by=Transaction.date,
        )

    def get_customer_orders(self) -> List[Transaction]:
        """Open orders assigned to a customer, without a reference number."""
        return self.transactions.find(
            Transaction.customer != "0",
            status=TransactionStatus.OPEN,
            ref_number="",
            order_by=Transaction.date,
        )

    def get_by_date(
        self,
        start: datetime,
        end: datetime,
        status: int,
        user_id: int = 0,
        till: int = 0,
    ) -> List[Transaction]:
        """
        Get transactions in a date range.

        Args:
            start: Range start (inclusive)
            end: Range end (inclusive)
            status: Transaction status to match
            user_id: Only this cashier's sales (0 = everyone)
            till: Only this till's sales (0 = every till)
        """
        if start > end:
            raise InvalidRequestError("Invalid date range")

        filters = {"status": status}
        if user_id:
            filters["user_id"] = user_id
        if till:
            filters["till"] = till

        return self.transactions.find(
            Transaction.date >= start,
            Transaction.date <= end,
            order_by=Transaction.date,
            **filters,
        )

    def create(self, transaction_data: TransactionCreate) -> Tuple[Transaction, bool]:
        """
        Store a new transaction.

        Returns:
            Tuple of (transaction, whether its items should come off stock)
        """
        values = self._values(transaction_data)
        transaction = self.transactions.insert(Transaction(**values))
        logger.info(f"Transaction #{transaction.id} created (total={transaction.total}, paid={transaction.paid})")

        return transaction, transaction.is_fully_paid

    def update(self, transaction_data: TransactionUpdate) -> Tuple[Transaction, bool]:
        """
        Replace an existing transaction.

        Returns:
            Tuple of (transaction, whether its items should come off stock now)
        """
        previous = self.get_by_id(transaction_data.id)
        was_paid = previous.is_fully_paid

        values = self._values(transaction_data)
        self.transactions.update({"id": transaction_data.id}, values, replace=True)

        transaction = self.get_by_id(transaction_data.id)
        logger.info(f"Transaction #{transaction.id} updated (total={transaction.total}, paid={transaction.paid})")

        return transaction, transaction.is_fully_paid and not was_paid

    def delete(self, transaction_id: int) -> None:
        if not self.transactions.remove({"id": transaction_id}):
            raise NotFoundError("Transaction not found")

    @staticmethod
    def _values(transaction_data) -> dict:
        values = transaction_data.model_dump(exclude={"id"})
        if values["date"] is None:
            values.pop("date")
        return values
