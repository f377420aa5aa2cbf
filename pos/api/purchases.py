from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from pos.api.deps import get_purchase_service
from pos.services.errors import InvalidRequestError, NotFoundError, PersistenceError
from pos.services.purchase_service import PurchaseService
from pos.schemas.purchase import (
    PurchaseAddResponse,
    PurchaseCreate,
    PurchaseDeleteResponse,
    PurchaseIdRequest,
    PurchaseResponse,
    PurchaseStats,
)

router = APIRouter(prefix="/purchases", tags=["Purchases"])


@router.get(
    "/all",
    response_model=List[PurchaseResponse],
    summary="List all purchases",
    description="Get every purchase, newest first."
)
def list_purchases(service: PurchaseService = Depends(get_purchase_service)):
    """Get all purchases."""
    return service.get_purchases()


@router.post(
    "/byId",
    response_model=PurchaseResponse,
    summary="Get purchase by ID",
)
def get_purchase(
    request: PurchaseIdRequest,
    service: PurchaseService = Depends(get_purchase_service)
):
    """Get a purchase by ID."""
    if request.id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Purchase ID is required"
        )

    try:
        return service.get_purchase(request.id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.post(
    "/add",
    response_model=PurchaseAddResponse,
    response_model_exclude_none=True,
    summary="Record a purchase",
    description="""
    Record a supplier purchase and add its quantities to stock.

    **Partial failures:**
    The purchase is stored first. Each line item then updates its product's
    stock independently. Items that can't be applied (unknown product,
    invalid quantity, failed write) are listed in `warnings`; the purchase
    and the other items are kept.
    """
)
def add_purchase(
    purchase_data: PurchaseCreate,
    service: PurchaseService = Depends(get_purchase_service)
):
    """
    Record a purchase.

    - **supplier**: Supplier name (required)
    - **items**: List of {productId, productName, quantity, buyingPrice} (required)
    - **totalAmount**: Amount paid, defaults to 0 (optional)
    - **notes**: Free-form notes (optional)
    """
    try:
        result = service.add_purchase(purchase_data)
    except InvalidRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add purchase"
        )

    purchase = PurchaseResponse.model_validate(result.purchase)

    if result.warnings:
        return PurchaseAddResponse(success=True, purchase=purchase, warnings=result.warnings)

    return PurchaseAddResponse(
        success=True,
        purchase=purchase,
        message="Purchase added and stock updated successfully"
    )


@router.post(
    "/delete",
    response_model=PurchaseDeleteResponse,
    summary="Delete a purchase",
    description="Delete a purchase record. Stock added by the purchase is NOT reversed."
)
def delete_purchase(
    request: PurchaseIdRequest,
    service: PurchaseService = Depends(get_purchase_service)
):
    """Delete a purchase (for correcting mistakes)."""
    if request.id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Purchase ID is required"
        )

    try:
        service.delete_purchase(request.id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete purchase"
        )

    return PurchaseDeleteResponse(success=True, message="Purchase deleted successfully")


@router.get(
    "/stats",
    response_model=PurchaseStats,
    summary="Purchase statistics",
    description="Number of purchases and amount spent, overall and per supplier."
)
def purchase_stats(service: PurchaseService = Depends(get_purchase_service)):
    """Get purchase totals."""
    return service.get_stats()
