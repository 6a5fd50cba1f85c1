"""Cart models for the wine market"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .base import CamelModel
from .wine import Number


class WineSnapshot(BaseModel):
    """Copy of the wine fields taken when the item was added"""
    id: int
    title: Optional[str] = None
    price: Optional[Number] = None
    points: Optional[Number] = None
    variety: Optional[str] = None
    region_1: Optional[str] = None
    thumbnail: Optional[str] = None


class CartItem(CamelModel):
    """Item in a shopping cart"""
    wine: WineSnapshot
    quantity: int = Field(gt=0)
    added_at: datetime

    @property
    def line_total(self) -> float:
        return (self.wine.price or 0) * self.quantity


class Cart(CamelModel):
    """Shopping cart owned by a single user"""
    user_id: str
    items: list[CartItem] = []
    created_at: datetime
    updated_at: datetime


class CartSummary(CamelModel):
    """Totals derived from the cart contents"""
    item_count: int = 0
    subtotal: float = 0.0
    tax: float = 0.0
    shipping: float = 0.0
    total: float = 0.0


class CartWithTotals(Cart):
    """Cart together with freshly computed totals"""
    summary: CartSummary


class AddToCartRequest(CamelModel):
    """Request to add a wine to the cart"""
    wine_id: int
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(CamelModel):
    """Request to set an item quantity. Zero or less removes the item."""
    quantity: int
