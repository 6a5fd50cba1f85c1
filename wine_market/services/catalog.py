"""Catalog queries: pagination, search, filtering and recommendations"""

import logging
import math
import random
import re
from typing import Any, Optional

from ..core.exceptions import ValidationError
from ..database.wines import WineCatalog
from ..models.wine import Wine, WineDetails, WinePage

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(value: Any) -> Optional[int]:
    """Integer prefix of a query value ("2.5" -> 2, "3abc" -> 3), or None"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _page_number(value: Any, default: int) -> int:
    parsed = _leading_int(value)
    if parsed is None or parsed < 1:
        return default
    return parsed


def _optional_text(value: Optional[str]) -> Optional[str]:
    return value.strip().lower() if value and value.strip() else None


def _optional_number(name: str, value: Any) -> Optional[float]:
    """Blank or missing means no constraint; anything else must be numeric"""
    if value is None:
        return None
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return float(value)
        except ValueError:
            raise ValidationError(f"Invalid {name}: must be a number") from None
    return float(value)


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and needle in text.lower()


class CatalogService:
    """Read-only queries over a WineCatalog"""

    def __init__(
        self,
        catalog: WineCatalog,
        default_limit: int = 21,
        recommendation_min_points: float = 90,
        recommendation_count: int = 5,
        similar_wines_count: int = 4,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.default_limit = default_limit
        self.recommendation_min_points = recommendation_min_points
        self.recommendation_count = recommendation_count
        self.similar_wines_count = similar_wines_count
        self.rng = rng or random.Random()

    def get_wine(self, wine_id: Any) -> Optional[Wine]:
        return self.catalog.get_wine(wine_id)

    def paginate(self, page: Any = None, limit: Any = None) -> WinePage:
        """
        Slice the catalog into pages.

        Pages past the end are returned empty rather than rejected.
        """
        page = _page_number(page, 1)
        limit = _page_number(limit, self.default_limit)

        wines = self.catalog.get_all_wines()
        start = (page - 1) * limit
        items = wines[start:start + limit]

        logger.debug(f"Pagination: returning {len(items)} wines for page {page}, limit {limit}")

        return WinePage(
            items=items,
            total=len(wines),
            page=page,
            limit=limit,
            total_pages=math.ceil(len(wines) / limit),
        )

    def search(self, query: Optional[str]) -> list[Wine]:
        """
        Case-insensitive substring search over title, description and winery.

        An empty query matches nothing.
        """
        if not query or not query.strip():
            return []

        needle = query.lower()
        return [
            w for w in self.catalog.get_all_wines()
            if _contains(w.title, needle)
            or _contains(w.description, needle)
            or _contains(w.winery, needle)
        ]

    def filter(
        self,
        region: Optional[str] = None,
        variety: Optional[str] = None,
        min_price: Any = None,
        max_price: Any = None,
        wine_type: Optional[str] = None,
        country: Optional[str] = None,
        min_rating: Any = None,
    ) -> list[Wine]:
        """
        Filter wines by region, variety, price range, type, country and rating.

        Every supplied criterion must hold; blank values are ignored. Region
        matches either region field. Price bounds are inclusive and exclude
        wines without a price; the rating is a minimum on points.

        Raises:
            ValidationError: a price or rating is given but not numeric
        """
        region = _optional_text(region)
        variety = _optional_text(variety)
        wine_type = _optional_text(wine_type)
        country = _optional_text(country)
        min_price = _optional_number("minPrice", min_price)
        max_price = _optional_number("maxPrice", max_price)
        min_rating = _optional_number("rating", min_rating)

        results = self.catalog.get_all_wines()
        logger.debug(f"Total wines before filtering: {len(results)}")

        if region:
            results = [
                w for w in results
                if _contains(w.region_1, region) or _contains(w.region_2, region)
            ]
            logger.debug(f"After region filter ({region}): {len(results)} wines")

        if variety:
            results = [w for w in results if _contains(w.variety, variety)]
            logger.debug(f"After variety filter ({variety}): {len(results)} wines")

        if min_price is not None:
            results = [w for w in results if w.price is not None and w.price >= min_price]
            logger.debug(f"After min price filter ({min_price}): {len(results)} wines")

        if max_price is not None:
            results = [w for w in results if w.price is not None and w.price <= max_price]
            logger.debug(f"After max price filter ({max_price}): {len(results)} wines")

        if wine_type:
            results = [w for w in results if _contains(w.type, wine_type)]
            logger.debug(f"After type filter ({wine_type}): {len(results)} wines")

        if country:
            results = [w for w in results if _contains(w.country, country)]
            logger.debug(f"After country filter ({country}): {len(results)} wines")

        if min_rating is not None:
            results = [w for w in results if w.points is not None and w.points >= min_rating]
            logger.debug(f"After rating filter ({min_rating}): {len(results)} wines")

        if not results and (region or variety):
            self._log_unmatched(region, variety)

        return results

    def recommend(self, user_id: Optional[str] = None) -> list[Wine]:
        """
        Random sample of top-rated wines.

        The user id is accepted for API compatibility; no personalisation
        is performed.
        """
        top_rated = [
            w for w in self.catalog.get_all_wines()
            if w.points is not None and w.points >= self.recommendation_min_points
        ]
        count = min(self.recommendation_count, len(top_rated))
        return self.rng.sample(top_rated, count)

    def unique_regions(self) -> list[str]:
        """Get sorted unique regions from both region fields"""
        regions = set()
        for wine in self.catalog.get_all_wines():
            regions.update(wine.regions)
        return sorted(regions)

    def unique_varieties(self) -> list[str]:
        """Get sorted unique varieties"""
        return sorted({w.variety for w in self.catalog.get_all_wines() if w.variety})

    def get_wine_details(self, wine_id: Any) -> Optional[WineDetails]:
        """Get a wine with up to `similar_wines_count` similar wines, best rated first"""
        wine = self.catalog.get_wine(wine_id)
        if not wine:
            return None

        similar = [
            w for w in self.catalog.get_all_wines()
            if w.id != wine.id and self._similarity(wine, w) >= 2
        ]
        similar.sort(key=lambda w: w.points if w.points is not None else -math.inf, reverse=True)

        return WineDetails(
            **wine.model_dump(),
            similar_wines=similar[:self.similar_wines_count],
        )

    @staticmethod
    def _similarity(wine: Wine, other: Wine) -> int:
        """Count matching traits: variety, region, price within 30%, points within 5"""
        score = 0
        if wine.variety and other.variety == wine.variety:
            score += 1
        if (wine.region_1 and other.region_1 == wine.region_1) or (
            wine.region_2 and other.region_2 == wine.region_2
        ):
            score += 1
        if wine.price and other.price and wine.price * 0.7 <= other.price <= wine.price * 1.3:
            score += 1
        if (
            wine.points is not None
            and other.points is not None
            and abs(other.points - wine.points) <= 5
        ):
            score += 1
        return score

    def _log_unmatched(self, region: Optional[str], variety: Optional[str]) -> None:
        """Explain an empty filter result by checking the criteria against the data"""
        if region:
            known = {r.lower() for r in self.unique_regions()}
            similar = sorted(r for r in known if region in r or r in region)
            logger.info(
                f"No wines matched region '{region}' (exact match in data: {region in known})"
                + (f", similar regions: {', '.join(similar)}" if similar else "")
            )
        if variety:
            known = {v.lower() for v in self.unique_varieties()}
            similar = sorted(v for v in known if variety in v or v in variety)
            logger.info(
                f"No wines matched variety '{variety}' (exact match in data: {variety in known})"
                + (f", similar varieties: {', '.join(similar)}" if similar else "")
            )
