# storefront/handlers/__init__.py
"""HTTP routers"""
from .order_handlers import router as order_router
from .catalog_handlers import router as catalog_router
from .system_handlers import router as system_router
from .base_handler import storefront_error_handler, store_error_handler

__all__ = [
    'order_router',
    'catalog_router',
    'system_router',
    'storefront_error_handler',
    'store_error_handler'
]
