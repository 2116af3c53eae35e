"""
Integration tests against a real PostgreSQL database

Skipped unless DATABASE_URL is configured. The products table is reseeded,
so point DATABASE_URL at a disposable database.

Author: TM3
"""
import pytest

from catalog_search.core.seed import SEED_PRODUCTS, run_seed
from catalog_search.repositories.product_repository import ProductRepository
from catalog_search.services.search_service import SearchService, SearchStrategy

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def seeded_repository(database_url):
    repo = ProductRepository()
    run_seed(repo)
    return repo


def test_seed_inserts_catalog_in_order(seeded_repository):
    products, total = seeded_repository.find_all(limit=100, offset=0)

    assert total == len(SEED_PRODUCTS)
    assert [p.title for p in products] == [p.title for p in SEED_PRODUCTS]
    assert [p.id for p in products] == sorted(p.id for p in products)


def test_radar_search_end_to_end(seeded_repository):
    result = SearchService(seeded_repository).search('radar')

    assert result.is_palindrome is True
    radar = next(item for item in result.items if item.title == 'radar')
    assert radar.original_price == 100.0
    assert radar.final_price == 50.0
    assert radar.discount_percentage == 50


def test_search_is_case_insensitive_across_fields(seeded_repository):
    by_brand = SearchService(seeded_repository).search('SAMSUNG')
    by_description = SearchService(seeded_repository).search('televisor')

    assert [item.title for item in by_brand.items] == ['Smart TV 55']
    assert [item.title for item in by_description.items] == ['Smart TV 55']


def test_empty_query_lists_catalog(seeded_repository):
    result = SearchService(seeded_repository).search('')

    assert result.total_items == len(SEED_PRODUCTS)
    assert all(item.discount_percentage is None for item in result.items)


def test_exact_title_strategy(seeded_repository):
    service = SearchService(seeded_repository, strategy=SearchStrategy.EXACT_THEN_FALLBACK)

    assert [item.title for item in service.search('LEVEL').items] == ['level']
    assert service.search('TV').total_items == 0


def test_wildcards_match_literally(seeded_repository):
    assert seeded_repository.search_across_all_fields('%') == []
