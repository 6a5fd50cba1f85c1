"""Wine catalog API routes"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.exceptions import WineNotFoundError
from ..database.wines import WineCatalog
from ..models.wine import CatalogReloadResponse, Wine, WineDetails, WinePage
from ..services.catalog import CatalogService
from .deps import get_catalog_service, get_wine_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Wines"])


@router.get("/wines", response_model=WinePage)
async def list_wines(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Wines per page"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    List the catalog one page at a time.

    Missing or non-numeric page/limit fall back to their defaults.
    """
    logger.info(f"API request for wines: page={page}, limit={limit}")
    return catalog.paginate(page, limit)


# Registered before /wines/{wine_id} so the literal paths take precedence
@router.get("/wines/search", response_model=list[Wine])
async def search_wines(
    query: Optional[str] = Query(None, description="Text to look for in title, description or winery"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Search wines by title, description, or winery"""
    return catalog.search(query)


@router.get("/wines/filter", response_model=list[Wine])
async def filter_wines(
    region: Optional[str] = Query(None),
    variety: Optional[str] = Query(None),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    wine_type: Optional[str] = Query(None, alias="type", description="red, white, sparkling, ..."),
    country: Optional[str] = Query(None),
    rating: Optional[str] = Query(None, description="Minimum points"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Filter wines. All given criteria must match; blank parameters are ignored.
    """
    logger.info(
        f"Filter request: region={region or 'not specified'}, "
        f"variety={variety or 'not specified'}, "
        f"minPrice={min_price or 'not specified'}, "
        f"maxPrice={max_price or 'not specified'}, "
        f"type={wine_type or 'not specified'}, "
        f"country={country or 'not specified'}, "
        f"rating={rating or 'not specified'}"
    )
    results = catalog.filter(
        region,
        variety,
        min_price,
        max_price,
        wine_type=wine_type,
        country=country,
        min_rating=rating,
    )
    logger.info(f"Filter returned {len(results)} wines")
    return results


@router.get("/wines/{wine_id}", response_model=Wine)
async def get_wine(
    wine_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Get a wine by ID"""
    wine = catalog.get_wine(wine_id)
    if not wine:
        raise WineNotFoundError(wine_id)
    return wine


@router.get("/wines/{wine_id}/details", response_model=WineDetails)
async def get_wine_details(
    wine_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Get a wine together with similar wines"""
    details = catalog.get_wine_details(wine_id)
    if not details:
        raise WineNotFoundError(wine_id)
    return details


@router.get("/recommendations/{user_id}", response_model=list[Wine])
async def get_recommendations(
    user_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Random selection of top-rated wines"""
    return catalog.recommend(user_id)


@router.get("/regions", response_model=list[str])
async def list_regions(catalog: CatalogService = Depends(get_catalog_service)):
    """List all regions found in the catalog"""
    return catalog.unique_regions()


@router.get("/varieties", response_model=list[str])
async def list_varieties(catalog: CatalogService = Depends(get_catalog_service)):
    """List all grape varieties found in the catalog"""
    return catalog.unique_varieties()


@router.post("/catalog/reload", response_model=CatalogReloadResponse)
async def reload_catalog(wine_catalog: WineCatalog = Depends(get_wine_catalog)):
    """Re-read the catalog file"""
    count = wine_catalog.reload()
    return CatalogReloadResponse(count=count, source=wine_catalog.path)
