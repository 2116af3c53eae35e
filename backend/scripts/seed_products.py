"""
Seed the products table with the sample catalog

Drops every existing product and inserts the seed list (ids restart at 1).

Usage:
    python3 scripts/seed_products.py [--dry-run]

Author: TM3
"""
import argparse

from dotenv import load_dotenv

load_dotenv()

from catalog_search.core.seed import SEED_PRODUCTS, run_seed
from catalog_search.repositories.product_repository import ProductRepository


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Seed the products table')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be inserted without making changes')
    args = parser.parse_args(argv)

    print("=" * 80)
    print("SEED PRODUCTS")
    print("=" * 80)

    if args.dry_run:
        for product in SEED_PRODUCTS:
            print(f"  - {product.title} ({product.brand}): {product.price}")
        print(f"\nDRY RUN: {len(SEED_PRODUCTS)} products would be inserted")
        return 0

    inserted = run_seed(ProductRepository())
    print(f"\n✅ Inserted {inserted} products, now try /api/products/search?q=radar")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
