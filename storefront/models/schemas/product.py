# models/schemas/product.py
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

from .base import TimestampModel

class ProductBase(BaseModel):
    name: str = Field(..., max_length=255)
    description: Optional[str] = None
    price: float = Field(..., allow_inf_nan=False)
    category_id: Optional[int] = None
    image_url: Optional[str] = None

class ProductCreate(ProductBase):
    pass

class Product(ProductBase, TimestampModel):
    id: int


class ProductUpdate(BaseModel):
    """Partial update. Unset and null fields are left untouched."""
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(None, allow_inf_nan=False)
    category_id: Optional[int] = None
    image_url: Optional[str] = None

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)
