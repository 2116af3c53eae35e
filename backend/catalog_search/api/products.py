"""
Products API Endpoints
Paginated catalog listing

Author: TM3
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from catalog_search.domain.product import ProductPage
from catalog_search.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)
router = APIRouter()


def get_product_repository() -> ProductRepository:
    """FastAPI dependency for the product repository"""
    return ProductRepository()


@router.get("")
def get_products(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Get a page of products in ascending id order

    Returns products plus pagination info (currentPage, totalPages,
    hasNext, hasPrevious)
    """
    try:
        products, total = repo.find_all(limit=limit, offset=offset)
    except Exception as e:
        logger.error(f"Error fetching products (limit={limit}, offset={offset}): {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching products: {str(e)}")

    page = ProductPage.build(products, total, limit=limit, offset=offset)
    return page.model_dump(by_alias=True)
