# storefront/services/payment_service.py
import asyncio
import logging
import time
from typing import Optional, Dict, Any
import aiohttp
from ..config import Config
from ..exceptions import GatewayError
from ..models.payment import PaymentIntent
from ..utils.security import verify_payment_signature

class PaymentService:
    """Client for the hosted Razorpay orders API"""

    def __init__(self, key_id: Optional[str] = None, key_secret: Optional[str] = None,
                 api_url: Optional[str] = None, timeout: float = 30):
        self.key_id = key_id if key_id is not None else Config.RAZORPAY_KEY_ID
        self.key_secret = key_secret if key_secret is not None else Config.RAZORPAY_KEY_SECRET
        self.api_url = (api_url or Config.RAZORPAY_API_URL).rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    async def create_payment_order(self, amount: int, currency: Optional[str] = None) -> PaymentIntent:
        """Open a payment session for a tax-inclusive amount in whole units"""
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise GatewayError(f"Invalid payment amount: {amount!r}")

        payload = {
            "amount": amount * 100,  # rupees -> paise
            "currency": currency or Config.CURRENCY,
            "receipt": f"receipt_{int(time.time() * 1000)}"
        }

        data = await self._request("POST", "/orders", payload)

        if not data.get("id"):
            raise GatewayError("Gateway response did not contain an order id")

        self.logger.info(f"Payment order {data['id']} created for {payload['amount']} {payload['currency']}")

        return PaymentIntent(
            gateway_order_id=data["id"],
            amount=data.get("amount", payload["amount"]),
            currency=data.get("currency", payload["currency"]),
            receipt=data.get("receipt", payload["receipt"])
        )

    def verify_signature(self, gateway_order_id: str, gateway_payment_id: str,
                         signature: str, secret: Optional[str] = None) -> bool:
        """True only when the callback signature was produced with our key secret"""
        return verify_payment_signature(
            gateway_order_id,
            gateway_payment_id,
            signature,
            secret if secret is not None else self.key_secret
        )

    async def _request(self, method: str, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Call the gateway API and return the decoded JSON body"""
        if not self.key_id or not self.key_secret:
            raise GatewayError("Payment gateway credentials are not configured")

        try:
            async with aiohttp.ClientSession(
                auth=aiohttp.BasicAuth(self.key_id, self.key_secret),
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as session:
                async with session.request(method, f"{self.api_url}{path}", json=payload) as response:
                    data = await response.json(content_type=None)

                    if response.status >= 400:
                        error = (data or {}).get("error", {}) if isinstance(data, dict) else {}
                        raise GatewayError(
                            f"Gateway returned {response.status}: {error.get('description', 'unknown error')}"
                        )

                    return data or {}

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise GatewayError(f"Gateway request failed: {e}") from e
