# storefront/models/review.py
from datetime import date as Date
from typing import Optional
from pydantic import Field
from .base import ApiModel

class Review(ApiModel):
    id: str = Field(..., min_length=1)
    product_id: str
    user_id: str
    user_name: str
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    date: Date

class WishlistEntry(ApiModel):
    user_id: str = Field(..., min_length=1)
    product_id: str = Field(..., min_length=1)
