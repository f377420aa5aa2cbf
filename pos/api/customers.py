from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from pos.api.deps import get_customer_service
from pos.services.customer_service import CustomerService
from pos.services.errors import NotFoundError
from pos.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("/all", response_model=List[CustomerResponse], summary="List all customers")
def list_customers(service: CustomerService = Depends(get_customer_service)):
    return service.get_all()


@router.get("/customer/{customer_id}", response_model=CustomerResponse, summary="Get customer by ID")
def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    try:
        return service.get_by_id(customer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/customer",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a customer",
)
def create_customer(
    customer_data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service)
):
    return service.create(customer_data)


@router.put("/customer", response_model=CustomerResponse, summary="Update a customer")
def update_customer(
    customer_data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service)
):
    """Replace a customer's details. Fields left out are reset to blank."""
    try:
        return service.update(customer_data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/customer/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer",
)
def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    try:
        service.delete(customer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return None
