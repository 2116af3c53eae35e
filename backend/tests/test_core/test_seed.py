"""
Unit tests for catalog seeding
"""
from unittest.mock import Mock, call

from catalog_search.core.seed import SEED_PRODUCTS, run_seed
from catalog_search.repositories.product_repository import ProductRepository
from catalog_search.services.palindrome_service import PalindromeService


def test_run_seed_resets_table_and_inserts_products():
    repo = Mock(spec=ProductRepository)

    inserted = run_seed(repo)

    assert inserted == len(SEED_PRODUCTS)
    repo.ensure_schema.assert_called_once()
    repo.clear.assert_called_once()
    assert repo.create.call_args_list == [call(product) for product in SEED_PRODUCTS]


def test_seed_catalog_has_unique_titles_and_palindromes():
    titles = [product.title.lower() for product in SEED_PRODUCTS]
    palindrome_service = PalindromeService()

    assert len(titles) == len(set(titles))
    assert 'radar' in titles
    assert sum(palindrome_service.is_palindrome(title) for title in titles) >= 3
