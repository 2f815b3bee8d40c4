# storefront/exceptions.py

class StorefrontError(Exception):
    """Base class for all storefront errors"""
    status_code = 500
    public_message = "Operation failed"

class GatewayError(StorefrontError):
    """The payment gateway rejected a request or could not be reached"""
    public_message = "Payment gateway error"

class PaymentInitiationFailed(StorefrontError):
    public_message = "Payment initiation failed"

class PaymentVerificationFailed(StorefrontError):
    status_code = 400
    public_message = "Invalid Signature"

class OrderValidationError(StorefrontError):
    status_code = 400
    public_message = "Invalid order"

class OrderPersistenceFailed(StorefrontError):
    public_message = "Failed to place order"

class ContactDeliveryFailed(StorefrontError):
    public_message = "Failed to send message"

class StoreError(StorefrontError):
    public_message = "DB Error"

class NotFoundError(StorefrontError):
    status_code = 404
    public_message = "Not found"

class OrderNotFound(NotFoundError):
    public_message = "Order not found"

class ProductNotFound(NotFoundError):
    public_message = "Product not found"

class ReviewNotFound(NotFoundError):
    public_message = "Review not found"
