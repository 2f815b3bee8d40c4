# storefront/services/order_service.py
import json
import logging
import random
from decimal import Decimal
from typing import Iterable, List, Optional, Any
import asyncpg
from ..config import Config
from ..database.database import affected_rows
from ..exceptions import (
    GatewayError, OrderNotFound, OrderPersistenceFailed, OrderValidationError,
    PaymentInitiationFailed, PaymentVerificationFailed, StoreError
)
from ..models.order import Order, OrderItem, OrderStatus, PaymentProof, PlaceOrderRequest, ShippingDetails
from ..models.payment import PaymentIntent
from ..utils.formatters import round_half_up, shop_today

TAX_RATE = Decimal("0.03")

ORDER_SELECT = """
    SELECT o.*,
        COALESCE((SELECT json_agg(json_build_object(
            'product_id', oi.product_id,
            'name', oi.product_name,
            'quantity', oi.quantity,
            'price', oi.price,
            'image', oi.image_url
        ) ORDER BY oi.id)
        FROM order_items oi
        WHERE oi.order_id = o.id
        ), '[]'::json) as items
    FROM orders o
"""

def compute_total(items: Iterable[OrderItem]) -> int:
    """Subtotal plus the flat 3% tax, rounded to whole rupees"""
    subtotal = sum((item.line_total for item in items), Decimal(0))
    return round_half_up(subtotal * (1 + TAX_RATE))

def generate_order_id(prefix: str) -> str:
    """Prefix followed by a random six digit number"""
    return f"{prefix}{random.randint(100000, 999999)}"

class OrderService:
    """Checkout workflow: payment intent, verification, persistence and notifications"""

    def __init__(self, db, payment_service, notification_service, settings_service=None):
        self.db = db
        self.payment_service = payment_service
        self.notification_service = notification_service
        self.settings_service = settings_service
        self.logger = logging.getLogger(__name__)

    async def create_payment_intent(self, amount: int, currency: Optional[str] = None) -> PaymentIntent:
        """Open a gateway session; nothing is stored"""
        try:
            intent = await self.payment_service.create_payment_order(amount, currency)
        except GatewayError as e:
            self.logger.error(f"Payment initiation failed for amount {amount}: {e}")
            raise PaymentInitiationFailed(str(e)) from e

        self.logger.info(f"Payment intent {intent.gateway_order_id} ready ({intent.amount} {intent.currency})")
        return intent

    def verify_payment(self, proof: PaymentProof) -> None:
        """Raise PaymentVerificationFailed unless the gateway signature matches"""
        if not self.payment_service.verify_signature(
            proof.gateway_order_id,
            proof.gateway_payment_id,
            proof.signature
        ):
            self.logger.warning(
                f"Signature mismatch for gateway order {proof.gateway_order_id} "
                f"payment {proof.gateway_payment_id}"
            )
            raise PaymentVerificationFailed("Invalid Signature")

        self.logger.info(f"Payment {proof.gateway_payment_id} verified")

    async def place_order(self, request: PlaceOrderRequest) -> Order:
        """Validate, verify (online only), persist and announce an order"""
        expected_total = compute_total(request.items)
        if request.total != expected_total:
            raise OrderValidationError(
                f"Order total {request.total} does not match items total {expected_total}"
            )

        proof = request.payment
        if request.is_online:
            if proof is None:
                raise OrderValidationError("Online payment requires the gateway payment details")

            self.verify_payment(proof)

            existing = await self._find_by_payment_id(proof.gateway_payment_id)
            if existing:
                self.logger.info(
                    f"Payment {proof.gateway_payment_id} already recorded as order {existing.id}"
                )
                return existing
        elif proof is not None:
            raise OrderValidationError("Payment details are only accepted for online payments")

        order = Order(
            id=request.id or generate_order_id(await self._order_prefix()),
            user_id=request.user_id or "guest",
            date=shop_today(),
            status=OrderStatus.PENDING,
            total=expected_total,
            payment_method=request.payment_method,
            shipping_details=request.shipping_details,
            items=request.items,
            gateway_order_id=proof.gateway_order_id if proof else None,
            gateway_payment_id=proof.gateway_payment_id if proof else None
        )

        self.logger.info(f"Placing order {order.id} ({order.payment_method}, {order.total})")

        try:
            await self._insert_order(order)
        except asyncpg.exceptions.UniqueViolationError as e:
            if order.gateway_payment_id:
                existing = await self._find_by_payment_id(order.gateway_payment_id)
                if existing:
                    return existing
            self._log_persistence_failure(order, e)
            raise OrderPersistenceFailed(f"Order {order.id} could not be stored") from e
        except Exception as e:
            self._log_persistence_failure(order, e)
            raise OrderPersistenceFailed(f"Order {order.id} could not be stored") from e

        self.logger.info(f"Order {order.id} stored with {len(order.items)} item(s)")

        # The order is placed even when this mail fails
        await self.notification_service.notify_admin_new_order(order)

        return order

    async def list_orders(self) -> List[Order]:
        """All orders, newest first"""
        try:
            async with self.db.pool.acquire() as conn:
                rows = await conn.fetch(
                    ORDER_SELECT + " ORDER BY o.order_date DESC, o.created_at DESC"
                )
        except asyncpg.PostgresError as e:
            self.logger.error(f"Fetching orders failed: {e}", exc_info=True)
            raise StoreError(str(e)) from e

        return [self._row_to_order(row) for row in rows]

    async def get_order(self, order_id: str) -> Order:
        """One order with its items"""
        try:
            async with self.db.pool.acquire() as conn:
                row = await conn.fetchrow(ORDER_SELECT + " WHERE o.id = $1", order_id)
        except asyncpg.PostgresError as e:
            self.logger.error(f"Fetching order {order_id} failed: {e}", exc_info=True)
            raise StoreError(str(e)) from e

        if not row:
            raise OrderNotFound(order_id)
        return self._row_to_order(row)

    async def set_status(self, order_id: str, status: OrderStatus) -> None:
        """Overwrite the status (any status from any status) and email the customer"""
        status = OrderStatus(status)

        try:
            async with self.db.pool.acquire() as conn:
                result = await conn.execute(
                    "UPDATE orders SET status = $1 WHERE id = $2",
                    status.value, order_id
                )
                if affected_rows(result) == 0:
                    raise OrderNotFound(order_id)

                customer = await conn.fetchrow("""
                    SELECT shipping_email, shipping_first_name, shipping_last_name
                    FROM orders
                    WHERE id = $1
                """, order_id)
        except asyncpg.PostgresError as e:
            self.logger.error(f"Updating status of order {order_id} failed: {e}", exc_info=True)
            raise StoreError(str(e)) from e

        self.logger.info(f"Order {order_id} status set to {status.value}")

        if customer:
            name = f"{customer['shipping_first_name']} {customer['shipping_last_name']}".strip()
            await self.notification_service.notify_status_change(
                order_id, name, customer['shipping_email'], status.value
            )

    async def delete_order(self, order_id: str) -> None:
        """Delete line items then the header in one transaction"""
        try:
            async with self.db.pool.acquire() as conn:
                async with conn.transaction():
                    await conn.execute("DELETE FROM order_items WHERE order_id = $1", order_id)
                    result = await conn.execute("DELETE FROM orders WHERE id = $1", order_id)

                    if affected_rows(result) == 0:
                        raise OrderNotFound(order_id)
        except asyncpg.PostgresError as e:
            self.logger.error(f"Deleting order {order_id} failed: {e}", exc_info=True)
            raise StoreError(str(e)) from e

        self.logger.info(f"Order {order_id} deleted")

    async def _insert_order(self, order: Order) -> None:
        shipping = order.shipping_details

        async with self.db.pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute("""
                    INSERT INTO orders (
                        id, user_id, order_date, status, total_amount, payment_method,
                        gateway_order_id, gateway_payment_id,
                        shipping_first_name, shipping_last_name, shipping_email, shipping_phone,
                        shipping_address, shipping_city, shipping_state, shipping_zip
                    ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15, $16)
                """,
                    order.id, order.user_id, order.date, order.status.value, order.total,
                    order.payment_method, order.gateway_order_id, order.gateway_payment_id,
                    shipping.first_name, shipping.last_name, shipping.email, shipping.phone,
                    shipping.address, shipping.city, shipping.state, shipping.zip
                )

                for item in order.items:
                    await conn.execute("""
                        INSERT INTO order_items (
                            order_id, product_id, product_name, quantity, price, image_url
                        ) VALUES ($1, $2, $3, $4, $5, $6)
                    """, order.id, item.product_id, item.name, item.quantity, item.price, item.image)

    async def _find_by_payment_id(self, gateway_payment_id: str) -> Optional[Order]:
        try:
            async with self.db.pool.acquire() as conn:
                row = await conn.fetchrow(
                    ORDER_SELECT + " WHERE o.gateway_payment_id = $1",
                    gateway_payment_id
                )
        except asyncpg.PostgresError as e:
            self.logger.error(f"Looking up payment {gateway_payment_id} failed: {e}", exc_info=True)
            raise StoreError(str(e)) from e

        return self._row_to_order(row) if row else None

    async def _order_prefix(self) -> str:
        if self.settings_service is not None:
            try:
                prefix = await self.settings_service.get_setting("order_prefix")
                if prefix:
                    return prefix
            except Exception as e:
                self.logger.warning(f"Could not read order prefix setting: {e}")
        return Config.ORDER_PREFIX

    def _log_persistence_failure(self, order: Order, error: Exception) -> None:
        if order.gateway_payment_id:
            # Funds were captured upstream; this line is the only trace for reconciliation
            self.logger.error(
                f"Order {order.id} NOT stored after verified payment "
                f"(gateway order {order.gateway_order_id}, payment {order.gateway_payment_id}, "
                f"amount {order.total}): {error}",
                exc_info=True
            )
        else:
            self.logger.error(f"Storing order {order.id} failed: {error}", exc_info=True)

    @staticmethod
    def _row_to_order(row: Any) -> Order:
        items = row['items']
        if isinstance(items, str):
            items = json.loads(items, parse_float=Decimal)

        return Order(
            id=row['id'],
            user_id=row['user_id'],
            date=row['order_date'],
            status=row['status'],
            total=int(row['total_amount']),
            payment_method=row['payment_method'],
            gateway_order_id=row.get('gateway_order_id'),
            gateway_payment_id=row.get('gateway_payment_id'),
            shipping_details=ShippingDetails(
                first_name=row['shipping_first_name'],
                last_name=row['shipping_last_name'] or "",
                email=row['shipping_email'],
                phone=row['shipping_phone'],
                address=row['shipping_address'],
                city=row['shipping_city'],
                state=row['shipping_state'],
                zip=row['shipping_zip']
            ),
            items=[OrderItem.model_validate(item) for item in items or []]
        )
