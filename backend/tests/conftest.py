"""
Pytest fixtures and configuration for Catalog Search tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
"""
import os
from datetime import datetime
from decimal import Decimal
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv

from catalog_search.domain.product import Product
from catalog_search.repositories.product_repository import ProductRepository

# Load environment variables for tests
load_dotenv()


def make_product(id, title, price, brand="", description=""):
    """Build a Product domain model with fixed timestamps"""
    return Product(
        id=id,
        title=title,
        brand=brand,
        description=description,
        price=Decimal(str(price)),
        created_at=datetime(2025, 1, 1, 12, 0, 0),
        updated_at=datetime(2025, 1, 1, 12, 0, 0)
    )


def make_row(id, title, price, brand="", description=""):
    """Build a database row as returned by RealDictCursor"""
    return {
        'id': id,
        'title': title,
        'brand': brand,
        'description': description,
        'price': Decimal(str(price)),
        'created_at': datetime(2025, 1, 1, 12, 0, 0),
        'updated_at': datetime(2025, 1, 1, 12, 0, 0)
    }


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for integration tests

    Scope: session (created once per test session)
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not configured")
    return url


@pytest.fixture
def sample_products():
    """
    Provides a small catalog: one palindrome title and two regular products
    """
    return [
        make_product(1, "radar", "100.00", brand="Garmin", description="Radar de velocidad"),
        make_product(2, "Smart TV 55", "1299.99", brand="Samsung", description="Televisor 4K"),
        make_product(3, "Zapatillas running", "99.99", brand="abba sport", description="Trail"),
    ]


@pytest.fixture
def mock_repository():
    """
    Provides a Mock with the ProductRepository interface

    Every lookup returns nothing by default; tests set return values as needed.
    """
    repo = Mock(spec=ProductRepository)
    repo.find_all.return_value = ([], 0)
    repo.search_across_all_fields.return_value = []
    repo.find_by_exact_title.return_value = None
    repo.search_by_brand_or_description_contains.return_value = []
    return repo
