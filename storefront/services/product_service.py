# storefront/services/product_service.py
from typing import List, Optional
from ..database.database import affected_rows
from ..exceptions import ProductNotFound
from ..models.product import Product

def product_from_row(row) -> Product:
    return Product(
        id=row['id'],
        name=row['name'],
        price=row['price'],
        category=row['category'],
        description=row['description'],
        image=row['image_url'],
        shipping_cost=row['shipping_cost'] or 0,
        is_visible=row['is_visible']
    )

class ProductService:
    def __init__(self, db):
        self.db = db

    async def list_products(self) -> List[Product]:
        """Catalog, newest first"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch("""
                SELECT * FROM products
                ORDER BY created_at DESC
            """)
            return [product_from_row(row) for row in rows]

    async def get_product(self, product_id: str) -> Optional[Product]:
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow("""
                SELECT * FROM products
                WHERE id = $1
            """, product_id)
            return product_from_row(row) if row else None

    async def add_product(self, product: Product) -> None:
        async with self.db.pool.acquire() as conn:
            await conn.execute("""
                INSERT INTO products (
                    id, name, price, category, description,
                    image_url, shipping_cost, is_visible
                ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
            """,
                product.id,
                product.name,
                product.price,
                product.category,
                product.description,
                product.image,
                product.shipping_cost,
                product.is_visible
            )

    async def update_product(self, product_id: str, product: Product) -> None:
        """Edit a catalog entry; placed orders keep their own snapshot"""
        async with self.db.pool.acquire() as conn:
            result = await conn.execute("""
                UPDATE products
                SET name = $1, price = $2, category = $3, description = $4,
                    image_url = $5, shipping_cost = $6, is_visible = $7
                WHERE id = $8
            """,
                product.name,
                product.price,
                product.category,
                product.description,
                product.image,
                product.shipping_cost,
                product.is_visible,
                product_id
            )
            if affected_rows(result) == 0:
                raise ProductNotFound(product_id)

    async def delete_product(self, product_id: str) -> None:
        async with self.db.pool.acquire() as conn:
            result = await conn.execute("""
                DELETE FROM products
                WHERE id = $1
            """, product_id)
            if affected_rows(result) == 0:
                raise ProductNotFound(product_id)
