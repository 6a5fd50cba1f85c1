"""Cart API routes"""

from fastapi import APIRouter, Depends

from ..database.carts import CartDatabase
from ..models.cart import AddToCartRequest, Cart, CartWithTotals, UpdateCartItemRequest
from .deps import get_cart_db

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.get("/{user_id}", response_model=CartWithTotals)
async def get_cart(user_id: str, cart_db: CartDatabase = Depends(get_cart_db)):
    """Get cart contents with totals"""
    return cart_db.get_with_totals(user_id)


@router.post("/{user_id}/items", response_model=Cart)
async def add_to_cart(
    user_id: str,
    request: AddToCartRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Add an item to the cart"""
    return cart_db.add_item(user_id, request.wine_id, request.quantity)


@router.put("/{user_id}/items/{wine_id}", response_model=Cart)
async def update_cart_item(
    user_id: str,
    wine_id: str,
    request: UpdateCartItemRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Update item quantity in cart"""
    return cart_db.update_item(user_id, wine_id, request.quantity)


@router.delete("/{user_id}/items/{wine_id}", response_model=Cart)
async def remove_from_cart(
    user_id: str,
    wine_id: str,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Remove an item from the cart"""
    return cart_db.remove_item(user_id, wine_id)


@router.delete("/{user_id}", response_model=Cart)
async def clear_cart(user_id: str, cart_db: CartDatabase = Depends(get_cart_db)):
    """Clear all items from cart"""
    return cart_db.clear(user_id)
