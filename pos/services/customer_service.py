from typing import List
import logging

from pos.models.customer import Customer
from pos.schemas.customer import CustomerCreate, CustomerUpdate
from pos.services.errors import NotFoundError
from pos.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class CustomerService:
    """Service class for customers."""

    def __init__(self, customers: RecordStore[Customer]):
        self.customers = customers

    def get_all(self) -> List[Customer]:
        return self.customers.find(order_by=Customer.name)

    def get_by_id(self, customer_id: int) -> Customer:
        customer = self.customers.find_one(id=customer_id)

        if not customer:
            raise NotFoundError("Customer not found")

        return customer

    def create(self, customer_data: CustomerCreate) -> Customer:
        customer = self.customers.insert(Customer(**customer_data.model_dump()))
        logger.info(f"Customer created: {customer.name}")
        return customer

    def update(self, customer_data: CustomerUpdate) -> Customer:
        """Replace a customer's details. Raises NotFoundError if it doesn't exist."""
        values = customer_data.model_dump(exclude={"id"})

        if not self.customers.update({"id": customer_data.id}, values, replace=True):
            raise NotFoundError("Customer not found")

        logger.info(f"Customer updated: {customer_data.name}")
        return self.get_by_id(customer_data.id)

    def delete(self, customer_id: int) -> None:
        if not self.customers.remove({"id": customer_id}):
            raise NotFoundError("Customer not found")
