"""
Repository contract required by the search service

Any storage engine can back the search as long as it provides these
lookups. ProductRepository is the PostgreSQL implementation.
"""
from typing import List, Optional, Protocol, Tuple

from catalog_search.domain.product import Product


class ProductSearchRepository(Protocol):
    """Read-only product lookups used by SearchService"""

    def find_all(self, limit: int = 100, offset: int = 0) -> Tuple[List[Product], int]:
        """Page of products in ascending id order plus the total count"""
        ...

    def search_across_all_fields(self, query: str) -> List[Product]:
        """Case-insensitive substring match on title, brand or description"""
        ...

    def find_by_exact_title(self, title: str) -> Optional[Product]:
        """Case-insensitive exact title match"""
        ...

    def search_by_brand_or_description_contains(self, query: str) -> List[Product]:
        """Case-insensitive substring match on brand or description (queries longer than 3 chars)"""
        ...
