"""Cart storage for the wine market"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Iterator, Optional

from ..core.exceptions import CartItemNotFoundError, ValidationError, WineNotFoundError
from ..models.cart import Cart, CartItem, CartSummary, CartWithTotals, WineSnapshot
from .locks import UserLocks
from .wines import parse_wine_id

if TYPE_CHECKING:
    from ..services.catalog import CatalogService

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CartDatabase:
    """
    In-memory carts keyed by user id.

    Carts are created on first access and live for the process lifetime.
    Each user has a lock; all mutations of a cart happen while holding it.
    Callers get copies taken under the lock, never the stored cart.
    """

    def __init__(
        self,
        catalog: "CatalogService",
        tax_rate: float = 0.1,
        shipping_fee: float = 10.0,
    ):
        self.catalog = catalog
        self.tax_rate = tax_rate
        self.shipping_fee = shipping_fee
        self.carts: dict[str, Cart] = {}
        self._locks = UserLocks()

    @contextmanager
    def locked(self, user_id: str) -> Iterator[Cart]:
        """Hold the user's lock and yield their cart"""
        with self._locks.for_user(user_id):
            yield self._get_or_create(user_id)

    def get_cart(self, user_id: str) -> Cart:
        """Get the user's cart, creating an empty one if needed"""
        with self._locks.for_user(user_id):
            return self._get_or_create(user_id).model_copy(deep=True)

    def add_item(self, user_id: str, wine_id: Any, quantity: int = 1) -> Cart:
        """Add a wine to the cart, merging with an existing line for the same wine"""
        if quantity < 1:
            raise ValidationError("Quantity must be positive")

        wine = self.catalog.get_wine(wine_id)
        if not wine:
            raise WineNotFoundError(wine_id)

        with self.locked(user_id) as cart:
            existing_item = self._find_item(cart, wine.id)

            if existing_item:
                existing_item.quantity += quantity
            else:
                cart.items.append(
                    CartItem(
                        wine=WineSnapshot(
                            id=wine.id,
                            title=wine.title,
                            price=wine.price,
                            points=wine.points,
                            variety=wine.variety,
                            region_1=wine.region_1,
                            thumbnail=wine.thumbnail,
                        ),
                        quantity=quantity,
                        added_at=_now(),
                    )
                )

            cart.updated_at = _now()
            logger.info(f"Cart {user_id}: added {quantity}x wine {wine.id}")
            return cart.model_copy(deep=True)

    def update_item(self, user_id: str, wine_id: Any, quantity: int) -> Cart:
        """Set an item quantity. Zero or negative removes the item."""
        with self.locked(user_id) as cart:
            item = self._require_item(cart, wine_id)

            if quantity <= 0:
                cart.items = [i for i in cart.items if i is not item]
            else:
                item.quantity = quantity

            cart.updated_at = _now()
            return cart.model_copy(deep=True)

    def remove_item(self, user_id: str, wine_id: Any) -> Cart:
        """Remove an item from the cart"""
        with self.locked(user_id) as cart:
            item = self._require_item(cart, wine_id)
            cart.items = [i for i in cart.items if i is not item]
            cart.updated_at = _now()
            return cart.model_copy(deep=True)

    def clear(self, user_id: str) -> Cart:
        """Clear all items from cart"""
        with self.locked(user_id) as cart:
            cart.items = []
            cart.updated_at = _now()
            return cart.model_copy(deep=True)

    def get_with_totals(self, user_id: str) -> CartWithTotals:
        """Get the cart with a freshly computed summary"""
        with self.locked(user_id) as cart:
            return CartWithTotals(
                **cart.model_dump(),
                summary=self.summarize(cart),
            )

    def summarize(self, cart: Cart) -> CartSummary:
        """Compute cart totals"""
        subtotal = sum(item.line_total for item in cart.items)
        tax = round(subtotal * self.tax_rate, 2)
        shipping = self.shipping_fee if cart.items else 0.0
        return CartSummary(
            item_count=sum(item.quantity for item in cart.items),
            subtotal=round(subtotal, 2),
            tax=tax,
            shipping=shipping,
            total=round(subtotal + tax + shipping, 2),
        )

    def _get_or_create(self, user_id: str) -> Cart:
        cart = self.carts.get(user_id)
        if cart is None:
            now = _now()
            cart = Cart(user_id=user_id, items=[], created_at=now, updated_at=now)
            self.carts[user_id] = cart
            logger.debug(f"Created cart for user {user_id}")
        return cart

    @staticmethod
    def _find_item(cart: Cart, wine_id: Optional[int]) -> Optional[CartItem]:
        return next(
            (item for item in cart.items if item.wine.id == wine_id),
            None,
        )

    def _require_item(self, cart: Cart, wine_id: Any) -> CartItem:
        item = self._find_item(cart, parse_wine_id(wine_id))
        if not item:
            raise CartItemNotFoundError(wine_id)
        return item
