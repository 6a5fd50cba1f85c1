"""Wine catalog models"""

from typing import Optional, Union

from pydantic import BaseModel

from .base import CamelModel

Number = Union[int, float]


class Wine(BaseModel):
    """Wine record as found in the catalog file.

    Unknown keys from the dataset (country, province, designation, ...)
    are kept and passed through untouched.
    """
    id: int
    title: Optional[str] = None
    price: Optional[Number] = None
    points: Optional[Number] = None
    variety: Optional[str] = None
    region_1: Optional[str] = None
    region_2: Optional[str] = None
    winery: Optional[str] = None
    country: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None

    class Config:
        extra = "allow"
        from_attributes = True

    @property
    def regions(self) -> list[str]:
        return [r for r in (self.region_1, self.region_2) if r]


class WineDetails(Wine):
    """Wine record with a short list of similar wines"""
    similar_wines: list[Wine] = []


class WinePage(CamelModel):
    """One page of the catalog"""
    items: list[Wine]
    total: int
    page: int
    limit: int
    total_pages: int


class CatalogReloadResponse(BaseModel):
    """Result of re-reading the catalog file"""
    count: int
    source: str
