# storefront/app.py
import logging
from contextlib import asynccontextmanager
import asyncpg
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import Config
from .database.database import Database
from .exceptions import StorefrontError
from .handlers import (
    catalog_router,
    order_router,
    system_router,
    store_error_handler,
    storefront_error_handler
)
from .services.notification_service import NotificationService
from .services.order_service import OrderService
from .services.payment_service import PaymentService
from .services.product_service import ProductService
from .services.review_service import ReviewService, WishlistService
from .services.settings_service import SettingsService

class StorefrontAPI:
    def __init__(self, db=None, payment_service=None, notification_service=None):
        """Wire services around one database and build the FastAPI app"""
        self.logger = logging.getLogger(__name__)
        self.db = db or Database()
        self.payment_service = payment_service or PaymentService()
        self.notification_service = notification_service or NotificationService()
        self.settings_service = SettingsService(self.db)

        self.app = FastAPI(title="NRK Aura Storefront API", lifespan=self.lifespan)
        self.setup_state()
        self.setup_middleware()
        self.setup_handlers()

    @asynccontextmanager
    async def lifespan(self, app: FastAPI):
        await self.db.connect()
        self.logger.info("Storefront API started")
        try:
            yield
        finally:
            await self.db.close()
            self.logger.info("Storefront API stopped")

    def setup_state(self):
        state = self.app.state
        state.db = self.db
        state.settings_service = self.settings_service
        state.notification_service = self.notification_service
        state.order_service = OrderService(
            self.db,
            self.payment_service,
            self.notification_service,
            self.settings_service
        )
        state.product_service = ProductService(self.db)
        state.review_service = ReviewService(self.db)
        state.wishlist_service = WishlistService(self.db)

    def setup_middleware(self):
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=[Config.FRONTEND_URL],
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["*"],
            allow_credentials=True
        )

    def setup_handlers(self):
        self.app.include_router(system_router, prefix="/api")
        self.app.include_router(order_router, prefix="/api")
        self.app.include_router(catalog_router, prefix="/api")

        self.app.add_exception_handler(StorefrontError, storefront_error_handler)
        self.app.add_exception_handler(asyncpg.PostgresError, store_error_handler)
        self.app.add_exception_handler(asyncpg.InterfaceError, store_error_handler)

def create_app(**kwargs) -> FastAPI:
    return StorefrontAPI(**kwargs).app
