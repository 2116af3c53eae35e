"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: TM3
"""
from catalog_search.repositories.base import ProductSearchRepository
from catalog_search.repositories.product_repository import ProductRepository

__all__ = [
    'ProductSearchRepository',
    'ProductRepository'
]
