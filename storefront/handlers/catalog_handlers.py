# storefront/handlers/catalog_handlers.py
from typing import Any, List
from fastapi import APIRouter, Body, Depends
from ..exceptions import NotFoundError, ProductNotFound
from ..models.product import Product
from ..models.review import Review, WishlistEntry
from ..services.product_service import ProductService
from ..services.review_service import ReviewService, WishlistService
from ..services.settings_service import SettingsService
from .base_handler import (
    get_product_service, get_review_service, get_settings_service,
    get_wishlist_service, success
)

router = APIRouter()

# Products

@router.get("/products", tags=["products"])
async def list_products(products: ProductService = Depends(get_product_service)) -> List[dict]:
    return [product.to_api() for product in await products.list_products()]

@router.get("/products/{product_id}", tags=["products"])
async def get_product(product_id: str, products: ProductService = Depends(get_product_service)) -> dict:
    product = await products.get_product(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product.to_api()

@router.post("/products", tags=["products"])
async def add_product(product: Product, products: ProductService = Depends(get_product_service)) -> dict:
    await products.add_product(product)
    return success()

@router.put("/products/{product_id}", tags=["products"])
async def update_product(product_id: str, product: Product,
                         products: ProductService = Depends(get_product_service)) -> dict:
    await products.update_product(product_id, product)
    return success()

@router.delete("/products/{product_id}", tags=["products"])
async def delete_product(product_id: str, products: ProductService = Depends(get_product_service)) -> dict:
    await products.delete_product(product_id)
    return success()

# Reviews

@router.get("/reviews", tags=["reviews"])
async def list_reviews(reviews: ReviewService = Depends(get_review_service)) -> List[dict]:
    return [review.to_api() for review in await reviews.list_reviews()]

@router.post("/reviews", tags=["reviews"])
async def add_review(review: Review, reviews: ReviewService = Depends(get_review_service)) -> dict:
    await reviews.add_review(review)
    return success()

@router.delete("/reviews/{review_id}", tags=["reviews"])
async def delete_review(review_id: str, reviews: ReviewService = Depends(get_review_service)) -> dict:
    await reviews.delete_review(review_id)
    return success()

# Wishlist

@router.get("/wishlist/{user_id}", tags=["wishlist"])
async def get_wishlist(user_id: str, wishlist: WishlistService = Depends(get_wishlist_service)) -> List[dict]:
    return [product.to_api() for product in await wishlist.get_wishlist(user_id)]

@router.post("/wishlist", tags=["wishlist"])
async def add_to_wishlist(entry: WishlistEntry,
                          wishlist: WishlistService = Depends(get_wishlist_service)) -> dict:
    await wishlist.add_to_wishlist(entry)
    return success()

@router.delete("/wishlist/{user_id}/{product_id}", tags=["wishlist"])
async def remove_from_wishlist(user_id: str, product_id: str,
                               wishlist: WishlistService = Depends(get_wishlist_service)) -> dict:
    await wishlist.remove_from_wishlist(user_id, product_id)
    return success()

# Settings

@router.get("/settings", tags=["settings"])
async def get_settings(settings: SettingsService = Depends(get_settings_service)) -> dict:
    return await settings.get_all_settings()

@router.get("/settings/{key}", tags=["settings"])
async def get_setting(key: str, settings: SettingsService = Depends(get_settings_service)) -> dict:
    value = await settings.get_setting(key)
    if value is None:
        raise NotFoundError(key)
    return {"key": key, "value": value}

@router.put("/settings/{key}", tags=["settings"])
async def update_setting(key: str, value: Any = Body(..., embed=True),
                         settings: SettingsService = Depends(get_settings_service)) -> dict:
    await settings.update_setting(key, value)
    return success()
