# storefront/handlers/order_handlers.py
import logging
from typing import List
from fastapi import APIRouter, Depends
from ..models.order import PaymentProof, PlaceOrderRequest, StatusUpdate
from ..models.payment import PaymentIntentRequest
from ..services.order_service import OrderService
from .base_handler import get_order_service, success

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])

@router.post("/orders/payment-intent")
@router.post("/create-payment-order", include_in_schema=False)
async def create_payment_intent(payload: PaymentIntentRequest,
                                orders: OrderService = Depends(get_order_service)) -> dict:
    """Open a gateway session for the checkout modal"""
    intent = await orders.create_payment_intent(payload.amount, payload.currency)
    return intent.to_api()

@router.post("/orders/verify-payment")
@router.post("/verify-payment", include_in_schema=False)
async def verify_payment(proof: PaymentProof,
                         orders: OrderService = Depends(get_order_service)) -> dict:
    orders.verify_payment(proof)
    return success(message="Payment Verified")

@router.post("/orders")
async def place_order(payload: PlaceOrderRequest,
                      orders: OrderService = Depends(get_order_service)) -> dict:
    order = await orders.place_order(payload)
    return success(orderId=order.id)

@router.get("/orders")
async def list_orders(orders: OrderService = Depends(get_order_service)) -> List[dict]:
    return [order.to_api() for order in await orders.list_orders()]

@router.get("/orders/{order_id}")
async def get_order(order_id: str, orders: OrderService = Depends(get_order_service)) -> dict:
    order = await orders.get_order(order_id)
    return order.to_api()

@router.put("/orders/{order_id}/status")
async def update_order_status(order_id: str, payload: StatusUpdate,
                              orders: OrderService = Depends(get_order_service)) -> dict:
    await orders.set_status(order_id, payload.status)
    return success()

@router.delete("/orders/{order_id}")
async def delete_order(order_id: str, orders: OrderService = Depends(get_order_service)) -> dict:
    logger.info(f"Deleting order {order_id}")
    await orders.delete_order(order_id)
    return success()
