from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: float = Field(0.0, ge=0, description="Selling price")
    category: Optional[int] = Field(None, description="Category ID")
    quantity: Optional[int] = Field(0, ge=0, description="Stock on hand")
    stock_tracked: bool = Field(True, description="Whether sales and purchases move the stock")
    image: Optional[str] = Field(None, max_length=255, description="Image path")
    sku: str = Field("", max_length=64, description="Stock keeping unit")
    barcode: str = Field("", max_length=64, description="Barcode value")


class ProductSave(ProductBase):
    """Schema for POST /product: creates without an id, replaces with one."""
    id: Optional[int] = Field(None, description="ID of the product to replace")


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductWithCategory(ProductResponse):
    """Product joined with its category name ("N/A" when unknown)."""
    category_name: str = "N/A"


class ProductIdRequest(BaseModel):
    """Body of POST /byId and POST /delete."""
    id: Optional[int] = None


class SkuRequest(BaseModel):
    sku_code: Optional[str] = Field(None, alias="skuCode")

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class StockUpdateRequest(BaseModel):
    """Manual stock count for one product."""
    id: Optional[int] = None
    quantity: Optional[int] = Field(None, ge=0)
    reason: Optional[str] = None


class StockUpdateResponse(BaseModel):
    success: bool
    message: str
    new_quantity: int
