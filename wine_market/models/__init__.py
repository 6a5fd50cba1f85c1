# Wine Market Models

from .wine import Wine, WineDetails, WinePage, CatalogReloadResponse
from .cart import (
    WineSnapshot,
    CartItem,
    Cart,
    CartSummary,
    CartWithTotals,
    AddToCartRequest,
    UpdateCartItemRequest,
)
from .order import (
    Order,
    OrderItem,
    OrderStatus,
    ShippingAddress,
    PaymentInfo,
    CreateOrderRequest,
    CheckoutRequest,
    UpdateOrderStatusRequest,
)
from .profile import (
    UserProfile,
    Preferences,
    TastePreferences,
    TastingNote,
    TastingNoteRequest,
    PreferencesUpdate,
    TastePreferencesUpdate,
)

__all__ = [
    "Wine",
    "WineDetails",
    "WinePage",
    "CatalogReloadResponse",
    "WineSnapshot",
    "CartItem",
    "Cart",
    "CartSummary",
    "CartWithTotals",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ShippingAddress",
    "PaymentInfo",
    "CreateOrderRequest",
    "CheckoutRequest",
    "UpdateOrderStatusRequest",
    "UserProfile",
    "Preferences",
    "TastePreferences",
    "TastingNote",
    "TastingNoteRequest",
    "PreferencesUpdate",
    "TastePreferencesUpdate",
]
