from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from pos.api.deps import get_category_service
from pos.services.category_service import CategoryService
from pos.services.errors import NotFoundError
from pos.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("/all", response_model=List[CategoryResponse], summary="List all categories")
def list_categories(service: CategoryService = Depends(get_category_service)):
    return service.get_all()


@router.post(
    "/category",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
def create_category(
    category_data: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    return service.create(category_data.name)


@router.put("/category", response_model=CategoryResponse, summary="Rename a category")
def update_category(
    category_data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service)
):
    try:
        return service.update(category_data.id, category_data.name)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/category/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    description="Products in the category keep their (now dangling) category ID and show as N/A."
)
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service)
):
    try:
        service.delete(category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return None
