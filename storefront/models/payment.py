# storefront/models/payment.py
from typing import Optional
from .base import ApiModel

class PaymentIntentRequest(ApiModel):
    """Tax-inclusive total in whole currency units"""
    amount: int
    currency: Optional[str] = None

class PaymentIntent(ApiModel):
    """Hosted payment session created at the gateway"""
    gateway_order_id: str
    amount: int  # minor units (paise)
    currency: str
    receipt: Optional[str] = None
