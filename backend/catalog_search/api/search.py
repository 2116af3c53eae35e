"""
Search API Endpoints
Product search with palindrome discount

GET /api/products/search?q=<text>   (alias: searchTerm, q takes priority)

Without a query the endpoint returns the first page of the catalog.

Author: TM3
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from catalog_search.core.config import settings
from catalog_search.repositories.product_repository import ProductRepository
from catalog_search.services.search_service import SearchService, SearchStrategy

logger = logging.getLogger(__name__)
router = APIRouter()

MAX_QUERY_LENGTH = 255


def get_search_service() -> SearchService:
    """FastAPI dependency building the search service from settings"""
    return SearchService(
        repository=ProductRepository(),
        strategy=SearchStrategy(settings.SEARCH_STRATEGY),
        empty_query_page_size=settings.EMPTY_QUERY_PAGE_SIZE
    )


@router.get("/search")
def search_products(
    q: Optional[str] = Query(None, description="Search text"),
    search_term: Optional[str] = Query(None, alias="searchTerm", description="Alias of q"),
    service: SearchService = Depends(get_search_service)
):
    """
    Search products by title, brand or description

    Palindrome queries (e.g. "radar") get a 50% discount on every match.
    """
    # length limit applies to the chosen term only
    query = q or search_term or ''
    if len(query) > MAX_QUERY_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"Search term must be at most {MAX_QUERY_LENGTH} characters"
        )

    try:
        result = service.search(query)
    except Exception as e:
        logger.error(f"Search failed for query {query!r}: {e}")
        raise HTTPException(
            status_code=500,
            detail={
                "message": "Internal search error",
                "error": "Internal Server Error",
                "statusCode": 500
            }
        )

    return result.to_response()
