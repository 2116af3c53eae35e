"""
Search Service

Orchestrates a product search:
- Trims the raw query (None counts as empty)
- Empty query: returns the first page of the catalog, undiscounted
- Otherwise: evaluates the palindrome, queries the repository with the
  configured matching strategy and prices every match

Repository errors propagate unchanged to the caller.

Author: TM3
"""
from enum import Enum
from typing import List, Optional

from catalog_search.domain.product import Product
from catalog_search.domain.search import ResultItem, SearchResult
from catalog_search.repositories.base import ProductSearchRepository
from catalog_search.services.palindrome_service import PalindromeService
from catalog_search.services.pricing_service import DiscountPricingRule

DEFAULT_EMPTY_QUERY_PAGE_SIZE = 100


class SearchStrategy(str, Enum):
    """
    How a non-empty query is matched against the catalog

    UNIFIED: substring match on title, brand or description, any length.
    EXACT_THEN_FALLBACK: exact title match first; when nothing matches,
        substring match on brand or description for queries longer than
        3 characters. Misses title substrings that are not exact titles.
    """
    UNIFIED = "unified"
    EXACT_THEN_FALLBACK = "exact_then_fallback"


class SearchService:
    """Product search with palindrome discount"""

    def __init__(
        self,
        repository: ProductSearchRepository,
        palindrome_service: Optional[PalindromeService] = None,
        pricing_rule: Optional[DiscountPricingRule] = None,
        strategy: SearchStrategy = SearchStrategy.UNIFIED,
        empty_query_page_size: int = DEFAULT_EMPTY_QUERY_PAGE_SIZE
    ):
        self.repository = repository
        self.palindrome_service = palindrome_service or PalindromeService()
        self.pricing_rule = pricing_rule or DiscountPricingRule()
        self.strategy = SearchStrategy(strategy)
        self.empty_query_page_size = empty_query_page_size

    def search(self, raw_query: Optional[str]) -> SearchResult:
        """
        Search products and apply the palindrome discount

        Args:
            raw_query: Free-text query as received (may be None)

        Returns:
            SearchResult with the trimmed query, the palindrome flag and the
            priced items in repository order
        """
        query = (raw_query or '').strip()

        if not query:
            products, _ = self.repository.find_all(limit=self.empty_query_page_size, offset=0)
            return self._build_result('', False, products)

        is_palindrome = self.palindrome_service.is_palindrome(query)
        products = self._find_matches(query)

        return self._build_result(query, is_palindrome, products)

    def _find_matches(self, query: str) -> List[Product]:
        if self.strategy == SearchStrategy.EXACT_THEN_FALLBACK:
            exact = self.repository.find_by_exact_title(query)
            if exact is not None:
                return [exact]
            return self.repository.search_by_brand_or_description_contains(query)

        return self.repository.search_across_all_fields(query)

    def _build_result(self, query: str, is_palindrome: bool, products: List[Product]) -> SearchResult:
        items = [self._map_product_to_item(product, is_palindrome) for product in products]
        return SearchResult(
            query=query,
            is_palindrome=is_palindrome,
            items=items,
            total_items=len(items),
        )

    def _map_product_to_item(self, product: Product, is_palindrome: bool) -> ResultItem:
        quote = self.pricing_rule.price(product.price, is_palindrome)
        return ResultItem.from_product(product, quote)
