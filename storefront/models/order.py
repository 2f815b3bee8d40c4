# storefront/models/order.py
from datetime import date as Date
from enum import Enum
from typing import List, Optional
from pydantic import AliasChoices, Field
from .base import ApiModel, Money

class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

class PaymentMethod(str, Enum):
    """Labels produced by the checkout; the order field itself accepts any string"""
    ONLINE = "Paid (Online)"
    CASH_ON_DELIVERY = "Cash on Delivery"

class ShippingDetails(ApiModel):
    """Shipping snapshot embedded in an order"""
    first_name: str = Field(..., min_length=1)
    last_name: str = ""
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip: str = Field(..., min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

class OrderItem(ApiModel):
    """Line item captured at order time"""
    product_id: str = Field(
        ...,
        validation_alias=AliasChoices("productId", "id", "product_id"),
        serialization_alias="productId",
    )
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    price: Money = Field(..., ge=0)
    image: Optional[str] = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity

class PaymentProof(ApiModel):
    """Values handed back by the gateway checkout after a completed payment"""
    gateway_order_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("gatewayOrderId", "razorpay_order_id", "gateway_order_id"),
        serialization_alias="gatewayOrderId",
    )
    gateway_payment_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("gatewayPaymentId", "razorpay_payment_id", "gateway_payment_id"),
        serialization_alias="gatewayPaymentId",
    )
    signature: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("signature", "razorpay_signature"),
    )

class PlaceOrderRequest(ApiModel):
    """Order submitted by the checkout page"""
    id: Optional[str] = None
    user_id: str = "guest"
    total: int
    payment_method: str = PaymentMethod.CASH_ON_DELIVERY.value
    shipping_details: ShippingDetails
    items: List[OrderItem] = Field(..., min_length=1)
    payment: Optional[PaymentProof] = None

    @property
    def is_online(self) -> bool:
        return self.payment_method == PaymentMethod.ONLINE.value

class Order(ApiModel):
    """Persisted order"""
    id: str
    user_id: str
    date: Date
    status: OrderStatus
    total: int
    payment_method: str
    shipping_details: ShippingDetails
    items: List[OrderItem] = []
    gateway_order_id: Optional[str] = None
    gateway_payment_id: Optional[str] = None

class StatusUpdate(ApiModel):
    status: OrderStatus
