"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
"""
from catalog_search.domain.product import Product, ProductCreate, ProductPage
from catalog_search.domain.search import PriceQuote, ResultItem, SearchResult

__all__ = ['Product', 'ProductCreate', 'ProductPage', 'PriceQuote', 'ResultItem', 'SearchResult']
