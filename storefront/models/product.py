# storefront/models/product.py
from decimal import Decimal
from typing import Optional, List
from pydantic import Field
from .base import ApiModel, Money

class Product(ApiModel):
    """Catalog entry"""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    price: Money = Field(..., ge=0)
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    shipping_cost: Money = Decimal(0)
    is_visible: bool = True
    tags: List[str] = []
