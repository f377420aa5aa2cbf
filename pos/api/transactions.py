from fastapi import APIRouter, Depends, HTTPException, Query, status
from datetime import datetime
from typing import List
import logging

from pos.api.deps import get_transaction_service
from pos.services.errors import InvalidRequestError, NotFoundError
from pos.services.transaction_service import TransactionService, sold_items
from pos.schemas.transaction import (
    TransactionCreate,
    TransactionDeleteRequest,
    TransactionResponse,
    TransactionUpdate,
)
from pos.tasks.inventory_tasks import decrement_inventory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("/all", response_model=List[TransactionResponse], summary="List all transactions")
def list_transactions(service: TransactionService = Depends(get_transaction_service)):
    return service.get_all()


@router.get(
    "/on-hold",
    response_model=List[TransactionResponse],
    summary="List held orders",
    description="Open orders parked under a reference number."
)
def list_on_hold(service: TransactionService = Depends(get_transaction_service)):
    return service.get_on_hold()


@router.get(
    "/customer-orders",
    response_model=List[TransactionResponse],
    summary="List open customer orders",
)
def list_customer_orders(service: TransactionService = Depends(get_transaction_service)):
    return service.get_customer_orders()


@router.get(
    "/by-date",
    response_model=List[TransactionResponse],
    summary="List transactions in a date range",
)
def list_by_date(
    start: datetime = Query(..., description="Range start"),
    end: datetime = Query(..., description="Range end"),
    status_: int = Query(1, alias="status", ge=0, le=1, description="1 = paid, 0 = open"),
    user: int = Query(0, ge=0, description="Cashier ID, 0 for all"),
    till: int = Query(0, ge=0, description="Till number, 0 for all"),
    service: TransactionService = Depends(get_transaction_service)
):
    """Get transactions for the sales report."""
    try:
        return service.get_by_date(start, end, status_, user_id=user, till=till)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/new",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a transaction",
    description="""
    Record a sale or a held order.

    When the transaction is fully paid (`paid >= total`) a background task
    takes its items off stock. Partial payments never touch stock.
    """
)
def create_transaction(
    transaction_data: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service)
):
    transaction, completed = service.create(transaction_data)

    if completed:
        decrement_inventory.delay(sold_items(transaction))
        logger.info(f"Transaction #{transaction.id} completed, inventory decrement queued")

    return transaction


@router.put(
    "/new",
    response_model=TransactionResponse,
    summary="Update a transaction",
    description="Replace a transaction. Stock is decremented the first time it becomes fully paid."
)
def update_transaction(
    transaction_data: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        transaction, completed = service.update(transaction_data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if completed:
        decrement_inventory.delay(sold_items(transaction))
        logger.info(f"Transaction #{transaction.id} updated, inventory decrement queued")

    return transaction


@router.post("/delete", summary="Delete a transaction")
def delete_transaction(
    request: TransactionDeleteRequest,
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        service.delete(request.order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return {"success": True}


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get transaction by ID",
)
def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        return service.get_by_id(transaction_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
