# storefront/handlers/base_handler.py
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from ..exceptions import StorefrontError

logger = logging.getLogger(__name__)

# Services are built once per app and stored on app.state; handlers only borrow them

def get_order_service(request: Request):
    return request.app.state.order_service

def get_product_service(request: Request):
    return request.app.state.product_service

def get_review_service(request: Request):
    return request.app.state.review_service

def get_wishlist_service(request: Request):
    return request.app.state.wishlist_service

def get_settings_service(request: Request):
    return request.app.state.settings_service

def get_notification_service(request: Request):
    return request.app.state.notification_service

def get_database(request: Request):
    return request.app.state.db

def success(**extra) -> dict:
    return {"success": True, **extra}

async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Domain error -> status code with a client safe message"""
    content = {"success": False, "error": exc.public_message}

    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
        content["detail"] = str(exc)

    return JSONResponse(status_code=exc.status_code, content=content)

async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unwrapped database error -> generic 500"""
    logger.error(f"{request.method} {request.url.path} database error: {exc}", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "DB Error"}
    )
