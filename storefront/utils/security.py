# storefront/utils/security.py
import hashlib
import hmac

def payment_signature(gateway_order_id: str, gateway_payment_id: str, secret: str) -> str:
    """HMAC-SHA256 of '<order_id>|<payment_id>', hex encoded"""
    message = f"{gateway_order_id}|{gateway_payment_id}"

    return hmac.new(
        secret.encode(),
        message.encode(),
        hashlib.sha256
    ).hexdigest()

def verify_payment_signature(gateway_order_id: str, gateway_payment_id: str,
                             signature: str, secret: str) -> bool:
    """Check a payment callback signature against the shared secret"""
    if not secret or not signature:
        return False

    expected_signature = payment_signature(gateway_order_id, gateway_payment_id, secret)
    return hmac.compare_digest(signature.encode(), expected_signature.encode())
