from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from pos.api.deps import get_product_service
from pos.services.errors import NotFoundError
from pos.services.product_service import ProductService
from pos.schemas.product import (
    ProductIdRequest,
    ProductResponse,
    ProductSave,
    ProductWithCategory,
    SkuRequest,
    StockUpdateRequest,
    StockUpdateResponse,
)

router = APIRouter(prefix="/inventory", tags=["Inventory"])


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "/products",
    response_model=List[ProductResponse],
    summary="List all products",
)
def list_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    return service.get_all()


@router.get(
    "/all",
    response_model=List[ProductWithCategory],
    summary="List products with category names",
    description="Get all products with their category name, for the management screen."
)
def list_products_with_categories(service: ProductService = Depends(get_product_service)):
    """Get all products joined with category names."""
    return service.get_all_with_categories()


@router.get(
    "/product/{product_id}",
    summary="Get product by ID",
    description="Get product details. Results are cached in Redis."
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """
    Get a product by ID.

    Returns cached data if available, otherwise fetches from database
    and caches the result.
    """
    try:
        return service.get_by_id_cached(product_id)
    except NotFoundError as e:
        raise _not_found(e)


@router.post(
    "/byId",
    response_model=ProductResponse,
    summary="Get product by ID (POST)",
)
def get_product_by_id(
    request: ProductIdRequest,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by the ID in the request body."""
    if request.id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product ID is required"
        )

    try:
        return service.get_by_id(request.id)
    except NotFoundError as e:
        raise _not_found(e)


@router.post(
    "/product",
    response_model=ProductResponse,
    summary="Create or replace a product",
    description="Creates a product when no `id` is given, otherwise replaces the product with that ID."
)
def save_product(
    product_data: ProductSave,
    service: ProductService = Depends(get_product_service)
):
    """
    Create or replace a product.

    - **id**: Product to replace (omit to create)
    - **name**: Product name (required)
    - **quantity**: Stock on hand, must be non-negative
    - **stock_tracked**: Whether sales and purchases move the stock
    """
    try:
        return service.save(product_data)
    except NotFoundError as e:
        raise _not_found(e)


@router.post(
    "/product/sku",
    summary="Find product by SKU",
    description="Returns the product, or an empty object when no product matches."
)
def get_product_by_sku(
    request: SkuRequest,
    service: ProductService = Depends(get_product_service)
):
    """Look up a product by SKU (barcode scanner input)."""
    if not request.sku_code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="SKU code is required"
        )

    product = service.get_by_sku(request.sku_code)
    if product is None:
        return {}

    return ProductResponse.model_validate(product)


@router.post(
    "/update-stock",
    response_model=StockUpdateResponse,
    summary="Set stock after a manual count",
)
def update_stock(
    request: StockUpdateRequest,
    service: ProductService = Depends(get_product_service)
):
    """Overwrite a product's quantity (stock take, damage, corrections)."""
    if request.id is None or request.quantity is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product ID and quantity are required"
        )

    try:
        new_quantity = service.update_stock(request.id, request.quantity, request.reason)
    except NotFoundError as e:
        raise _not_found(e)

    return StockUpdateResponse(
        success=True,
        message="Stock updated successfully",
        new_quantity=new_quantity
    )


@router.post(
    "/delete",
    summary="Delete a product (POST)",
)
def delete_product_by_body(
    request: ProductIdRequest,
    service: ProductService = Depends(get_product_service)
):
    """Delete the product whose ID is in the request body."""
    if request.id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product ID is required"
        )

    try:
        service.delete(request.id)
    except NotFoundError as e:
        raise _not_found(e)

    return {"success": True}


@router.delete(
    "/product/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product by ID. Associated cache is also cleared."
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    try:
        service.delete(product_id)
    except NotFoundError as e:
        raise _not_found(e)

    return None
