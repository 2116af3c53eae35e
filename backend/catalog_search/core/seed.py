"""
Catalog seed data

Sample products loaded at startup (AUTO_SEED=true) or through
scripts/seed_products.py. Several titles are palindromes so the discount can
be tried right away: /api/products/search?q=radar

Author: TM3
"""
import logging
from decimal import Decimal
from typing import List

from catalog_search.domain.product import ProductCreate
from catalog_search.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


SEED_PRODUCTS: List[ProductCreate] = [
    ProductCreate(title="radar", brand="Garmin", description="Radar de velocidad para ciclismo", price=Decimal("100.00")),
    ProductCreate(title="level", brand="Stanley", description="Nivel de burbuja de aluminio 60cm", price=Decimal("33.33")),
    ProductCreate(title="kayak", brand="Pelican", description="Kayak recreativo de una plaza", price=Decimal("899.90")),
    ProductCreate(title="Reconocer", brand="Planeta", description="Libro de ensayos sobre la memoria", price=Decimal("19.99")),
    ProductCreate(title="Anita lava la tina", brand="Rubbermaid", description="Set de limpieza para baño", price=Decimal("89.95")),
    ProductCreate(title="Smart TV 55", brand="Samsung", description="Televisor 4K UHD con HDR", price=Decimal("1299.99")),
    ProductCreate(title="Notebook Pro 14", brand="Lenovo", description="Portátil liviano para oficina", price=Decimal("999.00")),
    ProductCreate(title="Audífonos inalámbricos", brand="Sony", description="Cancelación activa de ruido", price=Decimal("249.50")),
    ProductCreate(title="Cafetera espresso", brand="Oster", description="Cafetera con vaporizador de leche", price=Decimal("159.90")),
    ProductCreate(title="Zapatillas running", brand="abba sport", description="Zapatillas livianas para trail", price=Decimal("99.99")),
    ProductCreate(title="Mochila urbana", brand="Xiaomi", description="Mochila impermeable con puerto USB", price=Decimal("45.00")),
    ProductCreate(title="Tarjeta de regalo", brand="Tienda", description="Tarjeta promocional sin costo", price=Decimal("0.00")),
]


def run_seed(repository: ProductRepository, products: List[ProductCreate] = SEED_PRODUCTS) -> int:
    """
    Replace the catalog with the seed products

    Creates the table when missing, deletes existing products and inserts
    the seed list in order (ids start at 1).

    Returns:
        Number of products inserted
    """
    repository.ensure_schema()
    repository.clear()

    for product in products:
        repository.create(product)

    logger.info(f"Seeded {len(products)} products, search for a palindrome to get a discount")
    return len(products)
