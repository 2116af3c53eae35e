"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: TM3
"""
from typing import List, Optional, Tuple

from catalog_search.core.database import get_db_connection_dict
from catalog_search.domain.product import Product, ProductCreate

# Brand/description fallback search only runs for queries longer than this
MIN_FALLBACK_QUERY_LENGTH = 3

PRODUCT_COLUMNS = "id, title, brand, description, price, created_at, updated_at"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input only matches literally"""
    return (
        value.replace('\\', '\\\\')
        .replace('%', '\\%')
        .replace('_', '\\_')
    )


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a database row to the Product domain model"""
        return Product(
            id=row['id'],
            title=row['title'],
            brand=row['brand'] or '',
            description=row['description'] or '',
            price=row['price'],
            created_at=row.get('created_at'),
            updated_at=row.get('updated_at')
        )

    def ensure_schema(self) -> None:
        """Create the products table if it does not exist yet"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS products (
                    id SERIAL PRIMARY KEY,
                    title VARCHAR(255) NOT NULL UNIQUE,
                    brand VARCHAR(255) NOT NULL DEFAULT '',
                    description TEXT NOT NULL DEFAULT '',
                    price NUMERIC(10, 2) NOT NULL CHECK (price >= 0),
                    created_at TIMESTAMP NOT NULL DEFAULT NOW(),
                    updated_at TIMESTAMP NOT NULL DEFAULT NOW()
                )
            """)
            conn.commit()

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Internal product ID

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id = %s
            """, (product_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def find_all(self, limit: int = 100, offset: int = 0) -> Tuple[List[Product], int]:
        """
        Find a page of products

        Args:
            limit: Maximum results to return
            offset: Number of results to skip

        Returns:
            Tuple of (list of products in ascending id order, total count)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("SELECT COUNT(*) AS total FROM products")
            total = cursor.fetchone()['total']

            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                ORDER BY id ASC
                LIMIT %s OFFSET %s
            """, (limit, offset))

            rows = cursor.fetchall()
            products = [self._map_row_to_product(row) for row in rows]

            return products, total

        finally:
            cursor.close()
            conn.close()

    def search_across_all_fields(self, query: str) -> List[Product]:
        """
        Find products whose title, brand or description contains the query

        Case-insensitive, no minimum length. Blank queries return an empty
        list without touching the database.

        Args:
            query: Substring to look for

        Returns:
            List of matching products in ascending id order
        """
        if not query or not query.strip():
            return []

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            pattern = f"%{escape_like(query.strip())}%"
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE title ILIKE %s
                   OR brand ILIKE %s
                   OR description ILIKE %s
                ORDER BY id ASC
            """, (pattern, pattern, pattern))

            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def find_by_exact_title(self, title: str) -> Optional[Product]:
        """
        Find product by exact title (case-insensitive)

        Args:
            title: Product title, surrounding whitespace is ignored

        Returns:
            Product or None if not found (or title is blank)
        """
        if not title or not title.strip():
            return None

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE LOWER(title) = LOWER(%s)
                ORDER BY id ASC
                LIMIT 1
            """, (title.strip(),))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def search_by_brand_or_description_contains(self, query: str) -> List[Product]:
        """
        Find products whose brand or description contains the query

        Only queries longer than 3 characters are searched; shorter ones
        return an empty list without touching the database.

        Args:
            query: Substring to look for

        Returns:
            List of matching products in ascending id order
        """
        if not query or len(query.strip()) <= MIN_FALLBACK_QUERY_LENGTH:
            return []

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            pattern = f"%{escape_like(query.strip())}%"
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE brand ILIKE %s
                   OR description ILIKE %s
                ORDER BY id ASC
            """, (pattern, pattern))

            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def count(self) -> int:
        """Count all products"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("SELECT COUNT(*) AS total FROM products")
            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    def create(self, product: ProductCreate) -> Product:
        """
        Insert a new product

        Args:
            product: Fields of the product to create

        Returns:
            The stored Product (with id and timestamps)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO products (title, brand, description, price)
                VALUES (%s, %s, %s, %s)
                RETURNING {PRODUCT_COLUMNS}
            """, (product.title, product.brand, product.description, product.price))

            row = cursor.fetchone()
            conn.commit()

            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def clear(self) -> None:
        """Delete every product and restart the id sequence"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("TRUNCATE TABLE products RESTART IDENTITY")
            conn.commit()

        finally:
            cursor.close()
            conn.close()
