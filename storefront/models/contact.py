# storefront/models/contact.py
from pydantic import Field
from .base import ApiModel

class ContactMessage(ApiModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
