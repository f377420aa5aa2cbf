from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Category name")


class CategoryUpdate(CategoryCreate):
    id: int = Field(..., description="ID of the category to rename")


class CategoryResponse(BaseModel):
    id: int
    name: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
