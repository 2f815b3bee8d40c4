# storefront/services/review_service.py
from typing import List
from ..database.database import affected_rows
from ..exceptions import ProductNotFound, ReviewNotFound
from ..models.product import Product
from ..models.review import Review, WishlistEntry
from .product_service import product_from_row

class ReviewService:
    def __init__(self, db):
        self.db = db

    async def list_reviews(self) -> List[Review]:
        """All reviews, newest first"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch("""
                SELECT * FROM reviews
                ORDER BY date DESC
            """)
            return [
                Review(
                    id=row['id'],
                    product_id=row['product_id'],
                    user_id=row['user_id'],
                    user_name=row['user_name'],
                    rating=row['rating'],
                    comment=row['comment'],
                    date=row['date']
                )
                for row in rows
            ]

    async def add_review(self, review: Review) -> None:
        async with self.db.pool.acquire() as conn:
            await conn.execute("""
                INSERT INTO reviews (
                    id, product_id, user_id, user_name, rating, comment, date
                ) VALUES ($1, $2, $3, $4, $5, $6, $7)
            """,
                review.id,
                review.product_id,
                review.user_id,
                review.user_name,
                review.rating,
                review.comment,
                review.date
            )

    async def delete_review(self, review_id: str) -> None:
        async with self.db.pool.acquire() as conn:
            result = await conn.execute("""
                DELETE FROM reviews
                WHERE id = $1
            """, review_id)
            if affected_rows(result) == 0:
                raise ReviewNotFound(review_id)

class WishlistService:
    def __init__(self, db):
        self.db = db

    async def get_wishlist(self, user_id: str) -> List[Product]:
        """Products saved by a user"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch("""
                SELECT p.*
                FROM wishlist w
                JOIN products p ON w.product_id = p.id
                WHERE w.user_id = $1
                ORDER BY w.created_at DESC
            """, user_id)
            return [product_from_row(row) for row in rows]

    async def add_to_wishlist(self, entry: WishlistEntry) -> None:
        """Save a product; adding it twice is a no-op"""
        async with self.db.pool.acquire() as conn:
            async with conn.transaction():
                exists = await conn.fetchval("""
                    SELECT id FROM products
                    WHERE id = $1
                """, entry.product_id)

                if exists is None:
                    raise ProductNotFound(entry.product_id)

                await conn.execute("""
                    INSERT INTO wishlist (user_id, product_id)
                    VALUES ($1, $2)
                    ON CONFLICT (user_id, product_id) DO NOTHING
                """, entry.user_id, entry.product_id)

    async def remove_from_wishlist(self, user_id: str, product_id: str) -> None:
        async with self.db.pool.acquire() as conn:
            await conn.execute("""
                DELETE FROM wishlist
                WHERE user_id = $1 AND product_id = $2
            """, user_id, product_id)
